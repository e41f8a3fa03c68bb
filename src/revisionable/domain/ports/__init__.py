"""Interfaces the domain expects adapters to provide."""

from __future__ import annotations

from .diagnostics import DiagnosticsLogger
from .lookup import EntityLookup
from .persistence import RevisionRepository
from .unit_of_work import RevisionRepositories, RevisionUnitOfWork, UnitOfWork

__all__ = [
    "DiagnosticsLogger",
    "EntityLookup",
    "RevisionRepositories",
    "RevisionRepository",
    "RevisionUnitOfWork",
    "UnitOfWork",
]
