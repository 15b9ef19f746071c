"""Placeholder substitution for translation strings.

Expands ``{{ key }}`` placeholders using caller arguments first and the
effective translation table second.

Expansion is a single left-to-right pass: a substituted value is copied
into the output verbatim and never scanned again, so a value containing
literal ``{{...}}`` text stays literal and self-referencing keys cannot
loop.

An unresolvable placeholder stops substitution for that string: the output
is the text substituted so far followed by the untouched remainder,
starting at the failing placeholder.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from l10nbind.constants import PLACEHOLDER_PATTERN
from l10nbind.diagnostics import ErrorTemplate, L10nError, MissingArgumentOrKeyError

if TYPE_CHECKING:
    from l10nbind.localization.types import EffectiveTable, TranslationKey

__all__ = [
    "ArgumentValue",
    "format_argument",
    "resolve_key",
    "resolve_placeholders",
]

logger = logging.getLogger(__name__)

type ArgumentValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values accepted in an argument bag (anything a JSON object may hold)."""

_PLACEHOLDER_RE = re.compile(PLACEHOLDER_PATTERN)


def format_argument(value: object) -> str:
    """Render an argument value as it appears in output.

    Strings are inserted verbatim. Other JSON values use their JSON spelling
    (``true``, ``null``, ``[1, 2]``) except numbers, which use ``str()``.

    Args:
        value: Argument value

    Returns:
        Text to insert
    """
    match value:
        case str():
            return value
        case bool() | None:
            return json.dumps(value)
        case int() | float():
            return str(value)
        case _:
            try:
                return json.dumps(value, ensure_ascii=False)
            except TypeError:
                return str(value)


def resolve_placeholders(
    raw: str,
    args: Mapping[str, object] | None,
    table: EffectiveTable,
) -> tuple[str, tuple[L10nError, ...]]:
    """Expand placeholders in a translation string.

    Lookup order per placeholder: argument bag, then effective table.

    Single pass: substituted values are inserted verbatim and never rescanned,
    so a table value that itself contains placeholders stays unexpanded.
    ``resolve_placeholders("{{greeting}}", {}, table)`` with
    ``greeting = "Hello {{name}}"`` yields ``"Hello {{name}}"``. To expand a
    translation by key, use resolve_key(), which resolves the key's own
    value against the table.

    Args:
        raw: Translation string possibly containing ``{{ key }}`` placeholders
        args: Argument bag (None is treated as empty)
        table: Effective table used for cross-key interpolation

    Returns:
        Tuple of (result, errors). Errors hold at most one
        MissingArgumentOrKeyError; substitution stops at that placeholder.

    Example:
        >>> resolve_placeholders("Hi {{name}}", {"name": "Ana"}, {"name": "World"})
        ('Hi Ana', ())
    """
    args = args or {}
    parts: list[str] = []
    cursor = 0

    for match in _PLACEHOLDER_RE.finditer(raw):
        key = match.group(1)
        if key in args:
            value = format_argument(args[key])
        elif key in table:
            value = table[key]
        else:
            error = MissingArgumentOrKeyError(ErrorTemplate.placeholder_unresolved(key))
            logger.warning("%s", error)
            parts.append(raw[cursor:])
            return "".join(parts), (error,)

        parts.append(raw[cursor : match.start()])
        parts.append(value)
        cursor = match.end()

    parts.append(raw[cursor:])
    return "".join(parts), ()


def resolve_key(
    key: TranslationKey,
    args: Mapping[str, object] | None,
    table: EffectiveTable,
) -> tuple[str, tuple[L10nError, ...]]:
    """Look up a key in the effective table and expand its placeholders.

    Args:
        key: Translation key
        args: Argument bag (None is treated as empty)
        table: Effective table

    Returns:
        Tuple of (result, errors). An unknown key yields the key itself and
        a MissingArgumentOrKeyError.

    Example:
        >>> table = {"greeting": "Hello {{name}}", "name": "World"}
        >>> resolve_key("greeting", {}, table)
        ('Hello World', ())
    """
    if key not in table:
        error = MissingArgumentOrKeyError(ErrorTemplate.key_not_found(key))
        logger.warning("%s", error)
        return key, (error,)
    return resolve_placeholders(table[key], args, table)
