"""Entity lookups over SQLAlchemy-mapped classes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import inspect

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


class SqlAlchemyEntityLookup:
    """Load mapped entities by primary key, honouring a soft-delete column.

    Every ``get`` opens its own short-lived session from ``sessions`` (usually
    a ``sessionmaker``), so a lookup held by a long-lived registry always sees
    committed data and can be shared between threads. Returned entities are
    detached; only their column attributes are loaded.

    Identifiers stored in revision rows are strings; they are coerced to the
    primary key's Python type before hitting the session. A value that cannot
    be coerced is treated as "not found".
    """

    def __init__(
        self,
        sessions: Callable[[], Session],
        entity_cls: type[Any],
        *,
        soft_delete_attribute: str | None = "deleted_at",
    ) -> None:
        self._sessions = sessions
        self._entity_cls = entity_cls
        self._soft_delete_attribute = soft_delete_attribute

    def get(self, identifier: object, *, include_deleted: bool = False) -> object | None:
        key = self._coerce_identifier(identifier)
        if key is None:
            return None
        with self._sessions() as session:
            entity = session.get(self._entity_cls, key)
        if entity is None:
            return None
        if not include_deleted and self._is_deleted(entity):
            return None
        return entity

    def _is_deleted(self, entity: object) -> bool:
        if self._soft_delete_attribute is None:
            return False
        return getattr(entity, self._soft_delete_attribute, None) is not None

    def _coerce_identifier(self, identifier: object) -> object | None:
        mapper = inspect(self._entity_cls)
        column = mapper.primary_key[0]
        try:
            python_type = cast(type[Any], column.type.python_type)
        except NotImplementedError:
            return identifier
        if isinstance(identifier, python_type):
            return identifier
        try:
            return python_type(str(identifier).strip())
        except (TypeError, ValueError):
            log.debug(
                "Cannot coerce identifier %r for %s to %s",
                identifier,
                self._entity_cls.__name__,
                python_type.__name__,
            )
            return None


if TYPE_CHECKING:
    from revisionable.domain.ports.lookup import EntityLookup

    _sessions_stub = cast("Callable[[], Session]", object())
    _lookup_check: EntityLookup = SqlAlchemyEntityLookup(_sessions_stub, object)
