"""Engine lifecycle and units of work for the revisions store.

``startup()`` binds one process-wide engine, maps ``Revision`` and migrates
the schema; units of work then open short-lived sessions on that engine.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal, Self

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from revisionable.adapters.sqlalchemy.mappings import start_mappers
from revisionable.adapters.sqlalchemy.migrations import upgrade_head
from revisionable.adapters.sqlalchemy.repositories import SqlAlchemyRevisionRepository
from revisionable.config import get_database_config
from revisionable.domain.ports.unit_of_work import RevisionRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the adapter is used before ``startup()`` or started twice."""


class _EngineState:
    def __init__(self) -> None:
        self.engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self._sessions = None

    def sessions(self) -> sessionmaker[Session]:
        if self._sessions is None:
            raise StartupError(
                "Revisions store not initialised. Call "
                "revisionable.adapters.sqlalchemy.unit_of_work.startup() first."
            )
        return self._sessions


_STATE = _EngineState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the engine, configure mappers and bring the schema to head.

    Without ``engine`` or ``database_uri`` the configured database is used.
    """

    if _STATE.engine is not None and not force:
        raise StartupError("Revisions store already initialised. Pass force=True to rebind.")

    if engine is None:
        config = get_database_config()
        engine = create_engine(database_uri or config.uri, echo=config.echo, future=True)

    start_mappers()
    upgrade_head(engine=engine)
    if force and _STATE.engine is not None and _STATE.engine is not engine:
        _STATE.reset()
    _STATE.bind(engine)
    log.info("Revisions store ready on %s", engine.url.render_as_string())


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the bound engine; ``startup()`` may be called again afterwards."""

    _STATE.reset()


class BaseSqlAlchemyUnitOfWork[TRepositories](ABC):
    """Session-per-block unit of work; subclasses choose the repositories."""

    def __init__(self) -> None:
        self._sessions = _STATE.sessions()
        self._session: Session | None = None
        self._repositories: TRepositories | None = None

    @abstractmethod
    def _build_repositories(self, session: Session) -> TRepositories: ...

    def __enter__(self) -> Self:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self._sessions()
        self._repositories = self._build_repositories(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not open; use it as a context manager")
        return self._session

    @property
    def repositories(self) -> TRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not open; use it as a context manager")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SqlAlchemyRevisionUnitOfWork(BaseSqlAlchemyUnitOfWork[RevisionRepositories]):
    def _build_repositories(self, session: Session) -> RevisionRepositories:
        return RevisionRepositories(revisions=SqlAlchemyRevisionRepository(session))


if TYPE_CHECKING:
    from revisionable.domain.ports.unit_of_work import RevisionUnitOfWork

    _uow_check: RevisionUnitOfWork = SqlAlchemyRevisionUnitOfWork()
