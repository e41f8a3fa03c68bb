"""Strategies for resolving the principal responsible for a revision."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from revisionable.config import RevisionConfig
    from revisionable.domain.registry import EntityRegistry

log = logging.getLogger(__name__)


@runtime_checkable
class ActorResolver(Protocol):
    """Return the principal record for an actor id, or ``None``."""

    def resolve(self, actor_id: str) -> object | None: ...


@runtime_checkable
class IdentityProvider(Protocol):
    """Identity package surface used for actor lookups."""

    def find_user_by_id(self, user_id: str) -> object | None: ...


@dataclass(frozen=True, slots=True)
class IdentityProviderActorResolver:
    """Resolve actors through a dedicated identity package."""

    provider: IdentityProvider

    def resolve(self, actor_id: str) -> object | None:
        return self.provider.find_user_by_id(actor_id)


@dataclass(frozen=True, slots=True)
class ConfiguredModelActorResolver:
    """Resolve actors through the registry entry configured as the user model."""

    registry: EntityRegistry
    actor_type: str

    def resolve(self, actor_id: str) -> object | None:
        descriptor = self.registry.require(self.actor_type)
        return descriptor.find(actor_id)


def select_actor_resolver(
    registry: EntityRegistry,
    config: RevisionConfig,
    *,
    identity_provider: IdentityProvider | None = None,
) -> ActorResolver:
    """Prefer the identity package when one is installed, else the configured model."""

    if identity_provider is not None:
        log.debug("Resolving revision actors through %r", identity_provider)
        return IdentityProviderActorResolver(identity_provider)
    log.debug("Resolving revision actors through entity type %s", config.actor_type)
    return ConfiguredModelActorResolver(registry, config.actor_type)
