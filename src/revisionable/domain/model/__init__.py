"""Public domain model surface."""

from __future__ import annotations

from revisionable.domain.model.enums import RevisionAction
from revisionable.domain.model.metadata import (
    DisplayMutator,
    RevisionMetadata,
    RevisionMutators,
    ValueMutator,
)
from revisionable.domain.model.revision import CREATED_KEY, DELETED_KEY, Revision, Which

__all__ = [
    "CREATED_KEY",
    "DELETED_KEY",
    "DisplayMutator",
    "Revision",
    "RevisionAction",
    "RevisionMetadata",
    "RevisionMutators",
    "ValueMutator",
    "Which",
]
