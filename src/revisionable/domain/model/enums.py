"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum


class RevisionAction(IntEnum):
    """Kind of mutation a revision row describes.

    Values match what the write side persists in the ``action`` column.
    """

    CREATE = 1
    INSERT = 2
    UPDATE = 3
    DELETE = 4
    REMOVE = 5

    @classmethod
    def coerce(cls, value: object) -> RevisionAction | None:
        """Return the matching action, or ``None`` for unmapped values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            value = value.strip()
            if not (value.isascii() and value.isdigit()):
                return None
            value = int(value)
        if not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
