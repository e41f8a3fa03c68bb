from __future__ import annotations

from dataclasses import dataclass

import pytest

from revisionable.domain.errors import UnregisteredEntityTypeError
from revisionable.domain.registry import EntityDescriptor, EntityRegistry, identifiable_name
from tests.helpers.entities import Author, FakeLookup, Post, Status


def test_register_and_require() -> None:
    descriptor = EntityDescriptor(type_name="post", lookup=FakeLookup())
    registry = EntityRegistry([descriptor])

    assert "post" in registry
    assert len(registry) == 1
    assert registry.require("post") is descriptor
    assert registry.get("ghost") is None


def test_require_unknown_type_raises() -> None:
    registry = EntityRegistry()

    with pytest.raises(UnregisteredEntityTypeError, match="ghost"):
        registry.require("ghost")


def test_duplicate_registration_requires_replace() -> None:
    registry = EntityRegistry([EntityDescriptor(type_name="post", lookup=FakeLookup())])
    replacement = EntityDescriptor(type_name="post", lookup=FakeLookup())

    with pytest.raises(ValueError, match="already registered"):
        registry.register(replacement)

    registry.register(replacement, replace=True)
    assert registry.require("post") is replacement


def test_related_returns_target_descriptor() -> None:
    post = EntityDescriptor(type_name="post", lookup=FakeLookup(), relations={"author": "author"})
    author = EntityDescriptor(type_name="author", lookup=FakeLookup())
    registry = EntityRegistry([post, author])

    assert registry.related(post, "author") is author
    assert registry.related(post, "editor") is None


def test_relations_are_read_only() -> None:
    relations = {"author": "author"}
    descriptor = EntityDescriptor(type_name="post", lookup=FakeLookup(), relations=relations)
    relations["editor"] = "user"

    assert descriptor.relation_target("editor") is None
    with pytest.raises(TypeError):
        descriptor.relations["editor"] = "user"  # type: ignore[index]


def test_identifiable_name_prefers_method_then_name_then_title_then_id() -> None:
    @dataclass
    class Anonymous:
        id: int

    assert identifiable_name(Author(id=1, first_name="Ada", last_name="Lovelace")) == (
        "Ada Lovelace"
    )
    assert identifiable_name(Status(id=2, name="Live")) == "Live"
    assert identifiable_name(Post(id=3, title="Hello")) == "Hello"
    assert identifiable_name(Anonymous(id=4)) == "4"


def test_custom_display_name() -> None:
    descriptor = EntityDescriptor(
        type_name="status",
        lookup=FakeLookup(),
        display_name=lambda status: status.name.upper(),
    )

    assert descriptor.display_name(Status(id=1, name="live")) == "LIVE"
