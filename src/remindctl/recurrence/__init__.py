"""Recurrence rules: parsing, store rule mapping and text rendering."""

from .adapter import from_external_rule, to_external_rule
from .external import ExternalRule
from .formatting import summary
from .parsing import RepeatInput, parse_recurrence, parse_recurrence_update

__all__ = [
    "RepeatInput",
    "parse_recurrence",
    "parse_recurrence_update",
    "ExternalRule",
    "to_external_rule",
    "from_external_rule",
    "summary",
]
