"""Repository interfaces for remindctl.

``RemindersStore`` is the port the service layer talks to. The SQLite
implementation lives in ``remindctl.adapters.sqlite``.
"""

from .repository import RemindersStore

__all__ = ["RemindersStore"]
