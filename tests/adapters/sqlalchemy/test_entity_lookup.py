"""Tests for loading related entities through SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import DateTime, ForeignKey, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from revisionable.adapters.sqlalchemy import SqlAlchemyEntityLookup
from revisionable.domain.model import Revision, RevisionMetadata
from revisionable.domain.registry import EntityDescriptor, EntityRegistry
from revisionable.domain.resolver import RevisionResolver

if TYPE_CHECKING:
    from collections.abc import Iterator


class Base(DeclarativeBase):
    pass


class Status(Base):
    __tablename__ = "statuses"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(64))


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(128))
    published_status_id: Mapped[int | None] = mapped_column(ForeignKey("statuses.id"))
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)


@pytest.fixture
def blog_sessions() -> Iterator[sessionmaker[Session]]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    sessions = sessionmaker(bind=engine, future=True)
    with sessions.begin() as session:
        session.add_all(
            [
                Status(id=1, name="Draft"),
                Status(id=3, name="Live"),
                Post(id=1, title="Hello", published_status_id=3),
                Post(id=2, title="Archived", deleted_at=datetime.now(tz=UTC)),
            ]
        )
    yield sessions
    engine.dispose()


def test_lookup_coerces_string_identifiers(blog_sessions: sessionmaker[Session]) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Status)

    status = lookup.get("3")

    assert isinstance(status, Status)
    assert status.name == "Live"


def test_lookup_returns_none_for_unknown_or_uncoercible_ids(
    blog_sessions: sessionmaker[Session],
) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Status)

    assert lookup.get("99") is None
    assert lookup.get("not-a-number") is None


def test_lookup_hides_soft_deleted_rows_unless_requested(
    blog_sessions: sessionmaker[Session],
) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Post)

    assert lookup.get("2") is None
    archived = lookup.get("2", include_deleted=True)
    assert isinstance(archived, Post)
    assert archived.title == "Archived"


def test_lookup_without_soft_delete_column(blog_sessions: sessionmaker[Session]) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Status, soft_delete_attribute=None)

    assert lookup.get(1) is not None


def test_resolver_dereferences_mapped_relations(blog_sessions: sessionmaker[Session]) -> None:
    registry = EntityRegistry(
        [
            EntityDescriptor(
                type_name="post",
                lookup=SqlAlchemyEntityLookup(blog_sessions, Post),
                metadata=RevisionMetadata(class_name="Post", primary_identifier="title"),
                relations={"publishedStatus": "status"},
            ),
            EntityDescriptor(
                type_name="status",
                lookup=SqlAlchemyEntityLookup(blog_sessions, Status),
                metadata=RevisionMetadata(unknown_string="(unknown)"),
            ),
        ]
    )
    resolver = RevisionResolver(registry)
    revision = Revision(
        owner_type="post",
        owner_id="2",
        key="published_status_id",
        old_value="1",
        new_value="3",
    )

    assert resolver.old_value(revision) == "Draft"
    assert resolver.new_value(revision) == "Live"
    assert resolver.primary_identifier_value(revision) == "Archived"


def test_lookup_sees_changes_committed_after_a_previous_read(
    blog_sessions: sessionmaker[Session],
) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Status)
    first = lookup.get("3")
    assert isinstance(first, Status)
    assert first.name == "Live"

    with blog_sessions.begin() as session:
        status = session.get(Status, 3)
        assert status is not None
        status.name = "Published"

    renamed = lookup.get("3")
    assert isinstance(renamed, Status)
    assert renamed.name == "Published"


def test_lookup_returns_entities_usable_after_its_session_closed(
    blog_sessions: sessionmaker[Session],
) -> None:
    lookup = SqlAlchemyEntityLookup(blog_sessions, Post)

    post = lookup.get(1)

    assert isinstance(post, Post)
    assert post.title == "Hello"
    assert post.published_status_id == 3
