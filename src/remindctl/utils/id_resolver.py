"""Resolve user-supplied reminder references to reminders.

A reference is either a 1-based index into the sorted reminder list (as
printed by ``remindctl show``) or a case-insensitive prefix of a reminder ID.
"""

from __future__ import annotations

from collections.abc import Sequence

from remindctl.models import AmbiguousReminderError, ReminderItem, ReminderNotFoundError

MIN_PREFIX_LENGTH = 4


def shortest_unique_prefix(target: str, others: Sequence[str], minimum: int = MIN_PREFIX_LENGTH) -> str:
    """Shortest prefix of ``target`` (at least ``minimum`` chars) not shared with ``others``."""
    target_upper = target.upper()
    others_upper = [o.upper() for o in others if o.upper() != target_upper]
    for length in range(min(minimum, len(target)), len(target) + 1):
        prefix = target_upper[:length]
        if not any(o.startswith(prefix) for o in others_upper):
            return target[:length]
    return target


class IDResolver:
    """Map indexes and ID prefixes onto reminders."""

    @staticmethod
    def resolve(inputs: Sequence[str], reminders: Sequence[ReminderItem]) -> list[ReminderItem]:
        """Resolve every reference in ``inputs``.

        Args:
            inputs: Indexes ("1") or ID prefixes ("4A2F")
            reminders: Reminders in display order

        Returns:
            The referenced reminders, in input order, without duplicates

        Raises:
            ReminderNotFoundError: If a reference matches nothing
            AmbiguousReminderError: If a prefix matches several reminders
        """
        resolved: list[ReminderItem] = []
        seen: set[str] = set()
        for raw in inputs:
            reminder = IDResolver.resolve_one(raw, reminders)
            if reminder.id not in seen:
                seen.add(reminder.id)
                resolved.append(reminder)
        return resolved

    @staticmethod
    def resolve_one(raw: str, reminders: Sequence[ReminderItem]) -> ReminderItem:
        value = raw.strip()
        if value.isdigit():
            index = int(value)
            if 1 <= index <= len(reminders):
                return reminders[index - 1]
            raise ReminderNotFoundError(value)

        if not value:
            raise ReminderNotFoundError(raw)

        prefix = value.upper()
        matches = [r for r in reminders if r.id.upper().startswith(prefix)]
        if not matches:
            raise ReminderNotFoundError(value)
        if len(matches) > 1:
            ids = [r.id for r in matches]
            hints = ", ".join(shortest_unique_prefix(i, ids) for i in ids)
            raise AmbiguousReminderError(f'Ambiguous ID "{value}" matches: {hints}')
        return matches[0]
