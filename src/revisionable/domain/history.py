"""Render a sequence of revisions into display rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from uuid import UUID

    from revisionable.domain.model import Revision
    from revisionable.domain.resolver import RevisionResolver

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RevisionView:
    """Display-ready projection of one revision."""

    revision_id: UUID
    owner_type: str
    owner_id: str
    class_name: str
    field_name: str
    old_value: str
    new_value: str
    summary: str
    actor_id: str | None
    actor: object | None
    created_at: datetime


def describe_revision(resolver: RevisionResolver, revision: Revision) -> RevisionView:
    return RevisionView(
        revision_id=revision.id,
        owner_type=revision.owner_type,
        owner_id=revision.owner_id,
        class_name=resolver.class_name(revision),
        field_name=resolver.field_name(revision),
        old_value=resolver.old_value(revision),
        new_value=resolver.new_value(revision),
        summary=resolver.revision_string(revision),
        actor_id=revision.actor_id,
        actor=resolver.actor_responsible(revision),
        created_at=revision.created_at,
    )


def describe_revisions(
    resolver: RevisionResolver,
    revisions: Iterable[Revision],
) -> list[RevisionView]:
    views = [describe_revision(resolver, revision) for revision in revisions]
    log.debug("Described %d revisions", len(views))
    return views
