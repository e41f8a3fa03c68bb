"""In-memory entities, lookups and registries for resolver tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from revisionable.domain.model import Revision, RevisionAction, RevisionMetadata, RevisionMutators
from revisionable.domain.registry import EntityDescriptor, EntityRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass
class Status:
    id: int
    name: str


@dataclass
class Author:
    id: int
    first_name: str
    last_name: str
    deleted_at: datetime | None = None

    def identifiable_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Post:
    id: int
    title: str
    slug: str | None = None
    deleted_at: datetime | None = None


@dataclass
class User:
    id: int
    name: str


@dataclass
class FakeLookup:
    """Dictionary-backed lookup that counts how often it is queried."""

    records: dict[str, object] = field(default_factory=dict)
    calls: list[tuple[object, bool]] = field(default_factory=list)

    def add(self, identifier: object, record: object) -> None:
        self.records[str(identifier)] = record

    def get(self, identifier: object, *, include_deleted: bool = False) -> object | None:
        self.calls.append((identifier, include_deleted))
        record = self.records.get(str(identifier))
        if record is None:
            return None
        if not include_deleted and getattr(record, "deleted_at", None) is not None:
            return None
        return record


@dataclass
class ExplodingLookup:
    """Lookup standing in for a relation whose accessor has gone away."""

    calls: int = 0

    def get(self, identifier: object, *, include_deleted: bool = False) -> object | None:
        self.calls += 1
        raise AttributeError(f"relation accessor removed (id={identifier!r})")


@dataclass
class BlogFixture:
    registry: EntityRegistry
    posts: FakeLookup
    statuses: FakeLookup
    authors: FakeLookup
    users: FakeLookup


def build_blog_registry(
    *,
    post_metadata: RevisionMetadata | None = None,
    post_relations: Mapping[str, str] | None = None,
    post_mutators: RevisionMutators | None = None,
    status_metadata: RevisionMetadata | None = None,
    author_mutators: RevisionMutators | None = None,
) -> BlogFixture:
    """Registry with ``post`` owning ``publishedStatus`` -> ``status`` and ``author``."""

    posts = FakeLookup()
    statuses = FakeLookup()
    authors = FakeLookup()
    users = FakeLookup()

    statuses.add(1, Status(id=1, name="Draft"))
    statuses.add(3, Status(id=3, name="Live"))
    authors.add(7, Author(id=7, first_name="Ada", last_name="Lovelace"))
    posts.add(1, Post(id=1, title="Hello", slug="hello"))
    users.add(42, User(id=42, name="Grace"))

    registry = EntityRegistry(
        [
            EntityDescriptor(
                type_name="post",
                lookup=posts,
                metadata=post_metadata or RevisionMetadata(class_name="Post"),
                relations=post_relations
                if post_relations is not None
                else {"publishedStatus": "status", "author": "author"},
                mutators=post_mutators or RevisionMutators(),
            ),
            EntityDescriptor(
                type_name="status",
                lookup=statuses,
                metadata=status_metadata
                or RevisionMetadata(null_string="(none)", unknown_string="(unknown)"),
            ),
            EntityDescriptor(
                type_name="author",
                lookup=authors,
                metadata=RevisionMetadata(null_string="no author", unknown_string="gone"),
                mutators=author_mutators or RevisionMutators(),
            ),
            EntityDescriptor(type_name="user", lookup=users),
        ]
    )
    return BlogFixture(
        registry=registry,
        posts=posts,
        statuses=statuses,
        authors=authors,
        users=users,
    )


def make_revision(
    key: str,
    *,
    old_value: str | None = None,
    new_value: str | None = None,
    owner_type: str = "post",
    owner_id: str = "1",
    action: int | None = RevisionAction.UPDATE,
    actor_id: str | None = None,
) -> Revision:
    return Revision(
        owner_type=owner_type,
        owner_id=owner_id,
        key=key,
        old_value=old_value,
        new_value=new_value,
        action=action,
        actor_id=actor_id,
    )
