"""Schema migrations for the local reminder store, in version order."""

from .m001_initial_schema import initial_migration

ALL_MIGRATIONS = [
    initial_migration,
]

__all__ = ["ALL_MIGRATIONS"]
