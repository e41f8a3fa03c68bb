"""Alembic entry points for the revisions schema.

The migration scripts ship inside the package, so an installed copy can
upgrade its database without a project checkout. The ``[tool.alembic]``
table in ``pyproject.toml`` points the ``alembic`` command line at the same
directory during development.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext

from revisionable.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent
HEAD: Final[str] = "head"

log = logging.getLogger(__name__)


def alembic_config(*, database_uri: str | None = None) -> Config:
    """Return an Alembic config bound to the bundled migration scripts."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    if database_uri is not None:
        config.set_main_option("sqlalchemy.url", database_uri)
    return config


def _upgrade_connection(connection: Connection) -> None:
    config = alembic_config()
    # env.py reuses this connection instead of opening its own
    config.attributes["connection"] = connection
    command.upgrade(config, HEAD)


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Upgrade the revisions schema to the latest migration.

    With an ``engine`` the upgrade runs on one of its connections, which keeps
    in-memory SQLite databases alive across the migration. Otherwise the
    database URI (or the configured default) is handed to Alembic.
    """

    if engine is not None:
        log.info("Upgrading revisions schema on %s", engine.url.render_as_string())
        with engine.begin() as connection:
            _upgrade_connection(connection)
        return

    uri = database_uri or get_database_config().uri
    log.info("Upgrading revisions schema on %s", uri)
    command.upgrade(alembic_config(database_uri=uri), HEAD)


def current_revision(engine: Engine) -> str | None:
    """Return the migration the database is stamped with, if any."""

    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()
