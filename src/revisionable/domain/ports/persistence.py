"""Storage port for revision rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from revisionable.domain.model import Revision


@runtime_checkable
class RevisionRepository(Protocol):
    """Append-only store of revisions; rows are never updated."""

    def add(self, revision: Revision) -> None: ...

    def get(self, revision_id: UUID) -> Revision | None: ...

    def for_owner(self, owner_type: str, owner_id: str) -> list[Revision]:
        """Revisions of one entity, oldest first."""
        ...

    def for_actor(self, actor_id: str) -> list[Revision]:
        """Revisions made by one actor, oldest first."""
        ...

    def latest_for_owner(self, owner_type: str, owner_id: str) -> Revision | None: ...
