"""Turn stored revision rows into display-ready field names and values.

Resolution never fails because of schema or data drift. Unknown owner types,
renamed relations, dangling references and failing mutators all degrade to a
fallback string (the raw value, the null string or the unknown string) and are
reported through the injected logger. The only error that reaches callers is
``PrimaryIdentifierError``, which signals a misconfigured entity type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from revisionable.config import RevisionConfig
from revisionable.domain.errors import (
    PrimaryIdentifierError,
    RelationNotFoundError,
    RevisionResolutionError,
)
from revisionable.domain.formatting import stringify
from revisionable.domain.naming import (
    is_foreign_key,
    relation_candidates,
    strip_foreign_key_suffix,
)
from revisionable.domain.summary import UNKNOWN_REVISION, build_summary_hooks

if TYPE_CHECKING:
    from collections.abc import Mapping

    from revisionable.domain.actors import ActorResolver
    from revisionable.domain.model import Revision, RevisionAction, Which
    from revisionable.domain.ports.diagnostics import DiagnosticsLogger
    from revisionable.domain.registry import EntityDescriptor, EntityRegistry
    from revisionable.domain.summary import SummaryHook

log = logging.getLogger(__name__)


class RevisionResolver:
    """Read-side renderer for revision rows.

    Instances hold no per-revision state and can be shared between threads as
    long as the registry is not mutated after start-up.
    """

    def __init__(
        self,
        registry: EntityRegistry,
        *,
        actor_resolver: ActorResolver | None = None,
        summary_hooks: Mapping[RevisionAction, SummaryHook] | None = None,
        logger: DiagnosticsLogger | None = None,
        config: RevisionConfig | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or RevisionConfig()
        self.actor_resolver = actor_resolver
        self._summary_hooks = build_summary_hooks(summary_hooks)
        self._log: DiagnosticsLogger = logger or log

    # Owner ---------------------------------------------------------------------

    def descriptor(self, revision: Revision) -> EntityDescriptor | None:
        """Return the owner's descriptor, or ``None`` when its type is unregistered."""
        try:
            return self.registry.require(revision.owner_type)
        except RevisionResolutionError as exc:
            self._log.info("Revisionable: %s", exc)
            return None

    def owner(self, revision: Revision, *, include_deleted: bool = True) -> object | None:
        """Load the entity the revision belongs to."""
        descriptor = self.descriptor(revision)
        if descriptor is None:
            return None
        return descriptor.find(revision.owner_id, include_deleted=include_deleted)

    def class_name(self, revision: Revision) -> str:
        descriptor = self.descriptor(revision)
        if descriptor is not None and descriptor.metadata.class_name:
            return descriptor.metadata.class_name
        return revision.owner_type

    # Field name ----------------------------------------------------------------

    def field_name(self, revision: Revision) -> str:
        return self._field_name(self.descriptor(revision), revision.key)

    def _field_name(self, descriptor: EntityDescriptor | None, key: str) -> str:
        if descriptor is not None:
            label = descriptor.metadata.field_label(key)
            if label:
                return label
        return strip_foreign_key_suffix(key)

    # Values --------------------------------------------------------------------

    def old_value(self, revision: Revision) -> str:
        return self.value(revision, "old")

    def new_value(self, revision: Revision) -> str:
        return self.value(revision, "new")

    def value(self, revision: Revision, which: Which = "new") -> str:
        raw = revision.raw_value(which)
        descriptor = self.descriptor(revision)
        if descriptor is None:
            return stringify(raw)

        if is_foreign_key(revision.key):
            try:
                return self._related_value(descriptor, revision.key, raw)
            except RevisionResolutionError as exc:
                self._log.info("Revisionable: %s", exc)
            except Exception:  # noqa: BLE001
                self._log.warning(
                    "Revisionable: could not resolve %s.%s=%r through its relation",
                    descriptor.type_name,
                    revision.key,
                    raw,
                    exc_info=True,
                )

        return self._plain_value(descriptor, revision.key, raw)

    def format(self, revision: Revision, value: object) -> str:
        """Apply the owner's formatting rule for the revision's key to ``value``."""
        descriptor = self.descriptor(revision)
        if descriptor is None:
            return stringify(value)
        return self._format(descriptor, revision.key, value)

    def _format(self, descriptor: EntityDescriptor, key: str, value: object) -> str:
        return stringify(descriptor.formatter.format(key, value))

    def _relation(self, descriptor: EntityDescriptor, key: str) -> EntityDescriptor:
        candidates = relation_candidates(key)
        for name in candidates:
            related = self.registry.related(descriptor, name)
            if related is not None:
                return related
        raise RelationNotFoundError(descriptor.type_name, candidates)

    def _related_value(self, descriptor: EntityDescriptor, key: str, raw: str | None) -> str:
        related = self._relation(descriptor, key)

        # an empty reference means "none", not "missing"
        if raw is None or raw == "":
            return self._null_string(related)

        record = related.find(raw)
        if record is None:
            return self._format(descriptor, key, self._unknown_string(related))

        chosen = related.mutators.revision_display(key, record)
        if chosen is None:
            chosen = related.mutators.display(key, record)
        if chosen is None:
            chosen = related.display_name(record)
        return self._format(descriptor, key, chosen)

    def _null_string(self, descriptor: EntityDescriptor) -> str:
        declared = descriptor.metadata.null_string
        return self.config.null_string if declared is None else declared

    def _unknown_string(self, descriptor: EntityDescriptor) -> str:
        declared = descriptor.metadata.unknown_string
        return self.config.unknown_string if declared is None else declared

    def _plain_value(self, descriptor: EntityDescriptor, key: str, raw: str | None) -> str:
        chosen: str | None = None
        try:
            chosen = descriptor.mutators.revision_value(key, raw)
            if chosen is None:
                chosen = descriptor.mutators.value(key, raw)
        except Exception:  # noqa: BLE001
            self._log.warning(
                "Revisionable: mutator for %s.%s failed, using the stored value",
                descriptor.type_name,
                key,
                exc_info=True,
            )
            chosen = None
        return self._format(descriptor, key, raw if chosen is None else chosen)

    # Summary -------------------------------------------------------------------

    def revision_string(self, revision: Revision) -> str:
        action = revision.revision_action
        if action is None:
            return UNKNOWN_REVISION
        hook = self._summary_hooks.get(action)
        if hook is None:
            return UNKNOWN_REVISION
        return hook(self, revision)

    # Primary identifier --------------------------------------------------------

    def primary_identifier_value(
        self,
        revision: Revision,
        alternative: str | None = None,
    ) -> object | Literal[False]:
        """Return the owner's human identifier, or ``False`` when none applies.

        Raises ``PrimaryIdentifierError`` when the identifier is configured but
        the loaded owner does not carry it.
        """
        descriptor = self.descriptor(revision)
        identifier = self._primary_identifier(descriptor, alternative)
        if not identifier or descriptor is None:
            return False

        entity = descriptor.find(revision.owner_id, include_deleted=True)
        if entity is None:
            return False

        value = getattr(entity, identifier, None)
        if value is None:
            raise PrimaryIdentifierError(descriptor.type_name, identifier)
        return value

    def primary_identifier_name(
        self,
        revision: Revision,
        alternative: str | None = None,
    ) -> str | Literal[False]:
        descriptor = self.descriptor(revision)
        identifier = self._primary_identifier(descriptor, alternative)
        if not identifier:
            return False
        return self._field_name(descriptor, identifier)

    @staticmethod
    def _primary_identifier(
        descriptor: EntityDescriptor | None,
        alternative: str | None,
    ) -> str | None:
        if alternative is not None:
            return alternative
        if descriptor is None:
            return None
        return descriptor.metadata.primary_identifier

    # Actor ---------------------------------------------------------------------

    def actor_responsible(self, revision: Revision) -> object | None:
        if revision.actor_id is None or self.actor_resolver is None:
            return None
        return self.actor_resolver.resolve(revision.actor_id)
