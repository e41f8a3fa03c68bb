"""Transaction boundary around the revision repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from revisionable.domain.ports.persistence import RevisionRepository


@runtime_checkable
class UnitOfWork[TRepositories](Protocol):
    """Context manager exposing repositories that share one transaction.

    Leaving the block with an exception rolls back; committing is explicit.
    """

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(frozen=True, slots=True)
class RevisionRepositories:
    revisions: RevisionRepository


type RevisionUnitOfWork = UnitOfWork[RevisionRepositories]
