"""Field value formatting driven by per-entity formatting directives.

A directive has the shape ``"<type>:<spec>"``, for example::

    {
        "public": "boolean:Yes|No",
        "minimum": "string:Min: %s",
    }

Supported types:
- ``boolean:<true label>|<false label>``
- ``string:<printf template with one %s>``
- ``isEmpty:<empty label>|<non-empty label>``
- ``datetime:<strftime format>`` (raw values are ISO-8601)
- ``options:<raw>.<label>|<raw>.<label>``

Formatting never raises: an unknown type or malformed spec returns the raw
value unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Final

log = logging.getLogger(__name__)

type FormatHandler = Callable[[object, str], str | None]

_FALSY_STRINGS: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off", "null"})
_DIRECTIVE_SEPARATOR: Final[str] = ":"
_LABEL_SEPARATOR: Final[str] = "|"
_OPTION_SEPARATOR: Final[str] = "."


def stringify(value: object) -> str:
    """Render a raw value as text, treating ``None`` as empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def is_truthy(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)


def _split_labels(spec: str) -> tuple[str, str] | None:
    labels = spec.split(_LABEL_SEPARATOR)
    if len(labels) != 2:  # noqa: PLR2004
        return None
    return labels[0], labels[1]


def _format_boolean(value: object, spec: str) -> str | None:
    labels = _split_labels(spec)
    if labels is None:
        return None
    true_label, false_label = labels
    return true_label if is_truthy(value) else false_label


def _format_string(value: object, spec: str) -> str | None:
    try:
        return spec % (stringify(value),)
    except (TypeError, ValueError):
        pass
    # a template without a conversion renders as its own text
    try:
        return spec % ()
    except (TypeError, ValueError):
        return None


def _format_is_empty(value: object, spec: str) -> str | None:
    labels = _split_labels(spec)
    if labels is None:
        return None
    empty_label, filled_label = labels
    return empty_label if stringify(value).strip() == "" else filled_label


def _format_datetime(value: object, spec: str) -> str | None:
    if isinstance(value, date):
        return value.strftime(spec)
    text = stringify(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed.strftime(spec)


def _format_options(value: object, spec: str) -> str | None:
    text = stringify(value)
    for option in spec.split(_LABEL_SEPARATOR):
        raw, separator, label = option.partition(_OPTION_SEPARATOR)
        if separator and raw == text:
            return label
    return None


_HANDLERS: Final[Mapping[str, FormatHandler]] = {
    "boolean": _format_boolean,
    "string": _format_string,
    "isEmpty": _format_is_empty,
    "datetime": _format_datetime,
    "options": _format_options,
}


def parse_directive(directive: str) -> tuple[str, str] | None:
    """Split ``"<type>:<spec>"``; return ``None`` when there is no separator."""
    kind, separator, spec = directive.partition(_DIRECTIVE_SEPARATOR)
    if not separator or not kind:
        return None
    return kind, spec


def format_field[T](key: str, value: T, rules: Mapping[str, str]) -> T | str:
    """Render ``value`` for ``key`` according to ``rules``.

    Without a rule, or when the rule cannot be applied, ``value`` is returned
    as given; the caller decides how to render ``None``.
    """
    directive = rules.get(key)
    if directive is None:
        return value

    parsed = parse_directive(directive)
    if parsed is None:
        log.debug("Ignoring malformed formatting directive for %s: %r", key, directive)
        return value

    kind, spec = parsed
    handler = _HANDLERS.get(kind)
    if handler is None:
        log.debug("Unknown formatting directive type %r for %s", kind, key)
        return value

    formatted = handler(value, spec)
    return value if formatted is None else formatted


@dataclass(frozen=True, slots=True)
class FieldFormatter:
    """Formatter bound to one entity type's rules."""

    rules: Mapping[str, str] = field(default_factory=dict)

    def has_rule(self, key: str) -> bool:
        return key in self.rules

    def format[T](self, key: str, value: T) -> T | str:
        return format_field(key, value, self.rules)
