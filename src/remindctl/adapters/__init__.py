"""Storage adapters for remindctl."""
