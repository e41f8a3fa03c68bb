"""Display defaults for revision rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var

DEFAULT_NULL_STRING: Final[str] = "nothing"
DEFAULT_UNKNOWN_STRING: Final[str] = "unknown"
DEFAULT_ACTOR_TYPE: Final[str] = "user"


@dataclass(frozen=True, slots=True)
class RevisionConfig:
    """Process-wide fallbacks used when an entity type does not declare its own."""

    null_string: str = DEFAULT_NULL_STRING
    unknown_string: str = DEFAULT_UNKNOWN_STRING
    actor_type: str = DEFAULT_ACTOR_TYPE


def get_revision_config() -> RevisionConfig:
    return RevisionConfig(
        null_string=optional_env_var("REVISIONABLE_NULL_STRING", DEFAULT_NULL_STRING),
        unknown_string=optional_env_var("REVISIONABLE_UNKNOWN_STRING", DEFAULT_UNKNOWN_STRING),
        actor_type=optional_env_var("REVISIONABLE_ACTOR_TYPE", DEFAULT_ACTOR_TYPE),
    )
