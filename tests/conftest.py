from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from revisionable.adapters.sqlalchemy import start_mappers
from revisionable.adapters.sqlalchemy.migrations import upgrade_head
from revisionable.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyRevisionUnitOfWork,
    shutdown,
    startup,
)
from tests.helpers.entities import BlogFixture, build_blog_registry

# never touch the user's data directory from tests
os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def blog() -> BlogFixture:
    return build_blog_registry()


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    """Migrated in-memory database; the pool keeps a single connection alive."""

    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    with Session(sqlite_engine) as session:
        yield session


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyRevisionUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)
    yield SqlAlchemyRevisionUnitOfWork
    shutdown()
