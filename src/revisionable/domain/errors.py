"""Errors raised while resolving revisions."""

from __future__ import annotations


class RevisionResolutionError(Exception):
    """Base class for recoverable resolution failures (schema or data drift)."""


class UnregisteredEntityTypeError(RevisionResolutionError, LookupError):
    """Raised when an entity type discriminator has no registered descriptor."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Entity type {type_name!r} is not registered")
        self.type_name = type_name


class RelationNotFoundError(RevisionResolutionError, LookupError):
    """Raised when none of the candidate relation names exist on an entity type."""

    def __init__(self, type_name: str, candidates: tuple[str, ...]) -> None:
        names = ", ".join(candidates)
        super().__init__(f"Relation {names} does not exist for {type_name}")
        self.type_name = type_name
        self.candidates = candidates


class PrimaryIdentifierError(RuntimeError):
    """Raised when a configured primary identifier is missing on a loaded entity.

    This signals a misconfigured entity type and is never downgraded to a
    fallback string.
    """

    def __init__(self, type_name: str, identifier: str) -> None:
        super().__init__(
            f"Primary identifier attribute {identifier!r} not set in revisionable model "
            f"{type_name!r}"
        )
        self.type_name = type_name
        self.identifier = identifier
