"""Per-entity-type revision metadata and optional value mutators."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from revisionable.config import RevisionConfig

type ValueMutator = Callable[[str | None], str]
type DisplayMutator = Callable[[Any], str]


def _frozen[V](values: Mapping[str, V] | None) -> Mapping[str, V]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class RevisionMetadata:
    """Read-only description of how an entity type renders its revisions."""

    formatted_field_names: Mapping[str, str] = field(default_factory=dict)
    formatted_fields: Mapping[str, str] = field(default_factory=dict)
    class_name: str | None = None
    primary_identifier: str | None = None
    # None defers to the process-wide RevisionConfig fallbacks
    null_string: str | None = None
    unknown_string: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "formatted_field_names", _frozen(self.formatted_field_names))
        object.__setattr__(self, "formatted_fields", _frozen(self.formatted_fields))

    @classmethod
    def from_config(
        cls,
        config: RevisionConfig,
        *,
        formatted_field_names: Mapping[str, str] | None = None,
        formatted_fields: Mapping[str, str] | None = None,
        class_name: str | None = None,
        primary_identifier: str | None = None,
    ) -> RevisionMetadata:
        return cls(
            formatted_field_names=formatted_field_names or {},
            formatted_fields=formatted_fields or {},
            class_name=class_name,
            primary_identifier=primary_identifier,
            null_string=config.null_string,
            unknown_string=config.unknown_string,
        )

    def field_label(self, key: str) -> str | None:
        return self.formatted_field_names.get(key)


@dataclass(frozen=True, slots=True)
class RevisionMutators:
    """Optional per-field hooks an entity type can declare.

    Owner-side mutators receive the raw stored value; display mutators receive
    the related record loaded for a foreign-key field. Every accessor returns
    ``None`` when nothing is declared for ``key``.
    """

    revision_values: Mapping[str, ValueMutator] = field(default_factory=dict)
    values: Mapping[str, ValueMutator] = field(default_factory=dict)
    revision_displays: Mapping[str, DisplayMutator] = field(default_factory=dict)
    displays: Mapping[str, DisplayMutator] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "revision_values", _frozen(self.revision_values))
        object.__setattr__(self, "values", _frozen(self.values))
        object.__setattr__(self, "revision_displays", _frozen(self.revision_displays))
        object.__setattr__(self, "displays", _frozen(self.displays))

    def revision_value(self, key: str, raw: str | None) -> str | None:
        mutator = self.revision_values.get(key)
        return None if mutator is None else mutator(raw)

    def value(self, key: str, raw: str | None) -> str | None:
        mutator = self.values.get(key)
        return None if mutator is None else mutator(raw)

    def revision_display(self, key: str, record: object) -> str | None:
        mutator = self.revision_displays.get(key)
        return None if mutator is None else mutator(record)

    def display(self, key: str, record: object) -> str | None:
        mutator = self.displays.get(key)
        return None if mutator is None else mutator(record)
