"""Foreign-key naming convention helpers.

A key is foreign-key shaped when it ends in ``_id`` and has a non-empty stem
(``author_id``). Relation names are looked up first by the plain stem and then
by its camel-case form, so ``published_status_id`` tries ``published_status``
followed by ``publishedStatus``.
"""

from __future__ import annotations

from typing import Final

FOREIGN_KEY_SUFFIX: Final[str] = "_id"


def is_foreign_key(key: str) -> bool:
    return len(key) > len(FOREIGN_KEY_SUFFIX) and key.endswith(FOREIGN_KEY_SUFFIX)


def strip_foreign_key_suffix(key: str) -> str:
    """Return ``key`` without its trailing ``_id``; other keys pass through."""
    if not is_foreign_key(key):
        return key
    return key[: -len(FOREIGN_KEY_SUFFIX)]


def camel_case(name: str) -> str:
    """Convert ``snake_case`` into ``camelCase``, dropping empty segments."""
    parts = [part for part in name.split("_") if part]
    if not parts:
        return name
    head, *tail = parts
    return head[:1].lower() + head[1:] + "".join(part[:1].upper() + part[1:] for part in tail)


def relation_candidates(key: str) -> tuple[str, ...]:
    """Return relation names to try, in order, for a foreign-key shaped key."""
    if not is_foreign_key(key):
        return ()
    stem = strip_foreign_key_suffix(key)
    camel = camel_case(stem)
    if camel == stem:
        return (stem,)
    return (stem, camel)
