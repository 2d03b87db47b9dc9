"""
Exit codes for remindctl.

Scripts driving remindctl can branch on these instead of parsing error text.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (bad repeat flags, bad dates)
ERROR_INVALID_ARGS = 2

# Reminder or list not found
ERROR_NOT_FOUND = 5

# Store refused the change (e.g. modifying a system list)
ERROR_PERMISSION_DENIED = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Reminder or list not found",
        ERROR_PERMISSION_DENIED: "The reminder store refused the change",
    }
    return descriptions.get(code, "Unknown error")


def exit_codes_help() -> str:
    """One ``code  NAME  description`` line per exit code, for ``--help``."""
    codes = (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND, ERROR_PERMISSION_DENIED)
    lines = ["Exit codes:"]
    lines += [
        f"  {code}  {get_exit_code_name(code)}  {get_exit_code_description(code)}"
        for code in codes
    ]
    return "\n\n".join(lines)
