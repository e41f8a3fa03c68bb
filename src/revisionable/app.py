"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from revisionable.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyRevisionUnitOfWork,
    is_started,
    startup,
)
from revisionable.config import get_revision_config
from revisionable.domain.actors import select_actor_resolver
from revisionable.domain.history import describe_revisions
from revisionable.domain.ports.unit_of_work import RevisionUnitOfWork
from revisionable.domain.resolver import RevisionResolver

if TYPE_CHECKING:
    from collections.abc import Mapping

    from revisionable.config import RevisionConfig
    from revisionable.domain.actors import IdentityProvider
    from revisionable.domain.history import RevisionView
    from revisionable.domain.model import RevisionAction
    from revisionable.domain.registry import EntityRegistry
    from revisionable.domain.summary import SummaryHook

type UnitOfWorkFactory = Callable[[], RevisionUnitOfWork]


log = getLogger(__name__)


def build_resolver(
    registry: EntityRegistry,
    *,
    config: RevisionConfig | None = None,
    identity_provider: IdentityProvider | None = None,
    summary_hooks: Mapping[RevisionAction, SummaryHook] | None = None,
) -> RevisionResolver:
    """Wire a resolver with the configured actor strategy and fallback strings."""

    effective_config = config or get_revision_config()
    actor_resolver = select_actor_resolver(
        registry,
        effective_config,
        identity_provider=identity_provider,
    )
    return RevisionResolver(
        registry,
        actor_resolver=actor_resolver,
        summary_hooks=summary_hooks,
        config=effective_config,
    )


def revision_history(
    owner_type: str,
    owner_id: object,
    *,
    resolver: RevisionResolver,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[RevisionView]:
    """Load and render every revision recorded for one entity."""

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyRevisionUnitOfWork

    log.info("Loading revision history: owner_type=%s, owner_id=%s", owner_type, owner_id)
    with unit_of_work_factory() as uow:
        revisions = uow.repositories.revisions.for_owner(owner_type, str(owner_id))
        views = describe_revisions(resolver, revisions)

    log.info("Rendered %d revisions for %s#%s", len(views), owner_type, owner_id)
    return views
