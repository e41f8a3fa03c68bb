"""One-line summaries of revisions, keyed by action kind.

DELETE and REMOVE have a fixed shape. CREATE, INSERT and UPDATE are hooks the
integrating application may replace; the defaults below are used otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from revisionable.domain.model import Revision, RevisionAction

if TYPE_CHECKING:
    from revisionable.domain.resolver import RevisionResolver

type SummaryHook = Callable[[RevisionResolver, Revision], str]

UNKNOWN_REVISION: Final[str] = "created unknown revision"

ACTION_LABELS: Final[Mapping[RevisionAction, str]] = MappingProxyType(
    {
        RevisionAction.CREATE: "created",
        RevisionAction.INSERT: "inserted",
        RevisionAction.UPDATE: "changed",
        RevisionAction.DELETE: "deleted",
        RevisionAction.REMOVE: "removed",
    }
)


def action_label(action: object) -> str | None:
    resolved = RevisionAction.coerce(action)
    return None if resolved is None else ACTION_LABELS[resolved]


def describe_entity(resolver: RevisionResolver, revision: Revision) -> str:
    """``"<label> (<class name>) ID:<owner id>"``."""
    label = action_label(revision.action)
    return f"{label} ({resolver.class_name(revision)}) ID:{revision.owner_id}"


def describe_insert(resolver: RevisionResolver, revision: Revision) -> str:
    label = ACTION_LABELS[RevisionAction.INSERT]
    return f"{label} {resolver.field_name(revision)}: {resolver.new_value(revision)}"


def describe_update(resolver: RevisionResolver, revision: Revision) -> str:
    label = ACTION_LABELS[RevisionAction.UPDATE]
    return (
        f"{label} {resolver.field_name(revision)} from {resolver.old_value(revision)} "
        f"to {resolver.new_value(revision)}"
    )


# DELETE removes one field's value, REMOVE the whole entity; both share a shape.
FIXED_SUMMARIES: Final[Mapping[RevisionAction, SummaryHook]] = MappingProxyType(
    {
        RevisionAction.DELETE: describe_entity,
        RevisionAction.REMOVE: describe_entity,
    }
)

DEFAULT_SUMMARY_HOOKS: Final[Mapping[RevisionAction, SummaryHook]] = MappingProxyType(
    {
        RevisionAction.CREATE: describe_entity,
        RevisionAction.INSERT: describe_insert,
        RevisionAction.UPDATE: describe_update,
    }
)


def build_summary_hooks(
    overrides: Mapping[RevisionAction, SummaryHook] | None = None,
) -> Mapping[RevisionAction, SummaryHook]:
    """Merge caller hooks over the defaults; DELETE and REMOVE cannot be overridden."""
    hooks: dict[RevisionAction, SummaryHook] = dict(DEFAULT_SUMMARY_HOOKS)
    for action, hook in (overrides or {}).items():
        if action in FIXED_SUMMARIES:
            raise ValueError(f"Summary for {action.name} is fixed and cannot be overridden")
        hooks[action] = hook
    hooks.update(FIXED_SUMMARIES)
    return MappingProxyType(hooks)
