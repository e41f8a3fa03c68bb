"""Table definition and imperative mapping for revision rows.

Column names follow the long-standing ``revisions`` table layout
(``revisionable_type``, ``revisionable_id``, ``user_id``); the Python-side
column keys match the ``Revision`` attributes.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Index, Integer, MetaData, String, Table, Text, Uuid, orm
from sqlalchemy.types import TypeDecorator

from revisionable.domain.model import Revision

if TYPE_CHECKING:
    from sqlalchemy import Dialect
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class AwareDateTime(TypeDecorator[datetime]):
    """Store UTC; hand back timezone-aware values even on SQLite."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        aware = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
        return aware.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=UTC)


metadata = MetaData(naming_convention={"pk": "pk_%(table_name)s"})
mapper_registry = orm.registry(metadata=metadata)

revision_table = Table(
    "revisions",
    metadata,
    Column("id", Uuid(), primary_key=True, default=uuid.uuid4),
    Column("revisionable_type", String(255), key="owner_type", nullable=False),
    Column("revisionable_id", String(255), key="owner_id", nullable=False),
    Column("user_id", String(255), key="actor_id", nullable=True),
    Column("key", String(255), nullable=False),
    Column("old_value", Text, nullable=True),
    Column("new_value", Text, nullable=True),
    Column("action", Integer, nullable=True),
    Column("created_at", AwareDateTime(), nullable=False),
    Index("ix_revisions_revisionable", "owner_type", "owner_id"),
    Index("ix_revisions_user_id", "actor_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Map ``Revision`` onto ``revisions``; safe to call repeatedly."""

    log.info("Mapping Revision onto %s", revision_table.name)
    mapper_registry.map_imperatively(Revision, revision_table)
    orm.configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create the tables directly, bypassing migrations."""

    log.info("Creating revision tables without migrations")
    metadata.create_all(engine)
