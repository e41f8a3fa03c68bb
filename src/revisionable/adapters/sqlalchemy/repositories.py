"""Revision repository backed by a SQLAlchemy session."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import Select, select

from revisionable.adapters.sqlalchemy.mappings import revision_table
from revisionable.domain.model import Revision

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

_columns = revision_table.c


def _owned_by(owner_type: str, owner_id: str) -> Select[tuple[Revision]]:
    return select(Revision).where(
        _columns.owner_type == owner_type,
        _columns.owner_id == str(owner_id),
    )


class SqlAlchemyRevisionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, revision: Revision) -> None:
        self.session.add(revision)

    def get(self, revision_id: UUID) -> Revision | None:
        return self.session.get(Revision, revision_id)

    def for_owner(self, owner_type: str, owner_id: str) -> list[Revision]:
        stmt = _owned_by(owner_type, owner_id).order_by(_columns.created_at.asc())
        return list(self.session.scalars(stmt))

    def for_actor(self, actor_id: str) -> list[Revision]:
        stmt = (
            select(Revision)
            .where(_columns.actor_id == str(actor_id))
            .order_by(_columns.created_at.asc())
        )
        return list(self.session.scalars(stmt))

    def latest_for_owner(self, owner_type: str, owner_id: str) -> Revision | None:
        stmt = _owned_by(owner_type, owner_id).order_by(_columns.created_at.desc()).limit(1)
        return self.session.scalars(stmt).first()


if TYPE_CHECKING:
    from revisionable.domain.ports.persistence import RevisionRepository

    _repo_check: RevisionRepository = SqlAlchemyRevisionRepository(cast("Session", object()))
