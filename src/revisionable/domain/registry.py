"""Closed registry mapping entity type discriminators to their descriptors.

Owning and related entity types are registered once at process start. A
revision's ``owner_type`` is resolved against this registry; unknown
discriminators are reported as ``UnregisteredEntityTypeError`` so callers can
fall back instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from revisionable.domain.errors import UnregisteredEntityTypeError
from revisionable.domain.formatting import FieldFormatter
from revisionable.domain.model import RevisionMetadata, RevisionMutators

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from revisionable.domain.ports.lookup import EntityLookup

log = logging.getLogger(__name__)

_DISPLAY_ATTRIBUTES = ("name", "title")


def identifiable_name(entity: Any) -> str:
    """Return a human name for ``entity``.

    Prefers an ``identifiable_name()`` method, then a ``name`` or ``title``
    attribute, then the ``id``.
    """
    method = getattr(entity, "identifiable_name", None)
    if callable(method):
        return str(method())
    for attribute in _DISPLAY_ATTRIBUTES:
        value = getattr(entity, attribute, None)
        if value is not None:
            return str(value)
    return str(getattr(entity, "id", entity))


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityDescriptor:
    """Everything the resolver needs to know about one trackable entity type."""

    type_name: str
    lookup: EntityLookup
    metadata: RevisionMetadata = field(default_factory=RevisionMetadata)
    # relation accessor name -> target type discriminator
    relations: Mapping[str, str] = field(default_factory=dict)
    mutators: RevisionMutators = field(default_factory=RevisionMutators)
    display_name: Callable[[Any], str] = identifiable_name

    def __post_init__(self) -> None:
        object.__setattr__(self, "relations", MappingProxyType(dict(self.relations)))

    @property
    def formatter(self) -> FieldFormatter:
        return FieldFormatter(self.metadata.formatted_fields)

    def relation_target(self, relation_name: str) -> str | None:
        return self.relations.get(relation_name)

    def find(self, identifier: object, *, include_deleted: bool = False) -> object | None:
        return self.lookup.get(identifier, include_deleted=include_deleted)


class EntityRegistry:
    """Registry of entity descriptors keyed by type discriminator."""

    def __init__(self, descriptors: Iterable[EntityDescriptor] | None = None) -> None:
        self._descriptors: dict[str, EntityDescriptor] = {}
        for descriptor in descriptors or ():
            self.register(descriptor)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def register(self, descriptor: EntityDescriptor, *, replace: bool = False) -> None:
        if descriptor.type_name in self._descriptors and not replace:
            raise ValueError(f"Entity type {descriptor.type_name!r} is already registered")
        log.debug("Registering revisionable entity type %s", descriptor.type_name)
        self._descriptors[descriptor.type_name] = descriptor

    def get(self, type_name: str) -> EntityDescriptor | None:
        return self._descriptors.get(type_name)

    def require(self, type_name: str) -> EntityDescriptor:
        descriptor = self._descriptors.get(type_name)
        if descriptor is None:
            raise UnregisteredEntityTypeError(type_name)
        return descriptor

    def related(self, owner: EntityDescriptor, relation_name: str) -> EntityDescriptor | None:
        """Return the target descriptor of ``owner.relation_name``.

        ``None`` means the relation does not exist; a relation pointing at an
        unregistered type raises ``UnregisteredEntityTypeError``.
        """
        target = owner.relation_target(relation_name)
        if target is None:
            return None
        return self.require(target)
