"""SQLAlchemy adapter package for revisionable."""

from __future__ import annotations

from .lookup import SqlAlchemyEntityLookup
from .mappings import create_all_tables, mapper_registry, revision_table, start_mappers
from .repositories import SqlAlchemyRevisionRepository

__all__ = [
    "SqlAlchemyEntityLookup",
    "SqlAlchemyRevisionRepository",
    "create_all_tables",
    "mapper_registry",
    "revision_table",
    "start_mappers",
]
