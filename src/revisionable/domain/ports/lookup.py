"""Ports for loading tracked entities by identifier."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EntityLookup(Protocol):
    """Load a single entity by its identifier.

    Identifiers arrive as stored in revision rows (usually strings); adapters
    coerce them to whatever their primary key type is. Soft-deleted rows are
    only returned when ``include_deleted`` is set.
    """

    def get(self, identifier: object, *, include_deleted: bool = False) -> object | None: ...
