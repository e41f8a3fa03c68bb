"""Revision rows: one persisted change per field or entity lifecycle event."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Final, Literal
from uuid import UUID, uuid4

from .enums import RevisionAction

# sentinel keys for whole-entity events
CREATED_KEY: Final[str] = "created_at"
DELETED_KEY: Final[str] = "deleted_at"

type Which = Literal["old", "new"]


def new_id() -> UUID:
    return uuid4()


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(eq=False, kw_only=True)
class Revision:
    """A single stored change for a tracked entity.

    ``owner_type``/``owner_id`` form the polymorphic reference to the mutated
    entity. ``old_value``/``new_value`` are stored serialized; ``None`` means
    "no value".
    """

    id: UUID = field(default_factory=new_id)
    owner_type: str
    owner_id: str
    key: str
    old_value: str | None = None
    new_value: str | None = None
    actor_id: str | None = None
    action: int | None = None
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def revision_action(self) -> RevisionAction | None:
        return RevisionAction.coerce(self.action)

    @property
    def is_entity_event(self) -> bool:
        return self.key in {CREATED_KEY, DELETED_KEY}

    def raw_value(self, which: Which) -> str | None:
        if which == "old":
            return self.old_value
        if which == "new":
            return self.new_value
        raise ValueError(f"which must be 'old' or 'new', got {which!r}")
