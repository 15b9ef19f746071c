"""Applies an effective table to document elements.

For every element carrying the key marker attribute, resolves its
translation and writes it to the target the key selects.

Per-element independence:
    Each element is translated in isolation. A malformed argument
    attribute, an unresolvable placeholder, or a missing text node affects
    only that element; the failure is logged and collected in ApplyReport.
    Element order does not affect the final document.

Target selection:
    ``greeting``       -> text content
    ``button.title``   -> title attribute
    ``logo.alt``       -> alt attribute
    ``intro.innerHTML``-> parsed markup content

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from l10nbind.config import BindingConfig
from l10nbind.constants import ATTRIBUTE_WHITELIST, DEFAULT_TARGET
from l10nbind.diagnostics import (
    ArgumentParseError,
    BindingError,
    ErrorTemplate,
    NoTranslatableTextError,
)
from l10nbind.enums import TargetProperty
from l10nbind.runtime.substitution import resolve_placeholders

if TYPE_CHECKING:
    from l10nbind.document.protocols import DocumentAccess, TranslatableElement
    from l10nbind.localization.types import EffectiveTable, TranslationKey

__all__ = [
    "ApplyReport",
    "BindingApplier",
    "BindingTarget",
    "apply_bindings",
    "parse_arguments",
    "target_for_key",
]

logger = logging.getLogger(__name__)

_EMPTY_ARGS: Mapping[str, object] = MappingProxyType({})


def target_for_key(
    key: TranslationKey, whitelist: frozenset[str] = ATTRIBUTE_WHITELIST
) -> TargetProperty:
    """Select the write target encoded in a key's last dot-separated suffix.

    A suffix only counts when something precedes the dot, so ``".title"``
    targets text content.

    Args:
        key: Translation key
        whitelist: Suffixes allowed to redirect the target

    Returns:
        Target property

    Example:
        >>> target_for_key("btn.title")
        <TargetProperty.TITLE: 'title'>
        >>> target_for_key("greeting")
        <TargetProperty.TEXT_CONTENT: 'textContent'>
    """
    index = key.rfind(".")
    if index > 0:
        suffix = key[index + 1 :]
        if suffix in whitelist:
            return TargetProperty(suffix)
    return TargetProperty(DEFAULT_TARGET)


def parse_arguments(
    raw: str | None, key: TranslationKey
) -> tuple[Mapping[str, object], ArgumentParseError | None]:
    """Parse an element's JSON argument attribute.

    Args:
        raw: Attribute value (None when absent)
        key: Element's translation key (for diagnostics)

    Returns:
        Tuple of (args, error). Absent or blank attributes give empty args
        and no error; invalid JSON or a non-object value gives empty args
        and an ArgumentParseError.
    """
    if raw is None or not raw.strip():
        return _EMPTY_ARGS, None
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        return _EMPTY_ARGS, ArgumentParseError(ErrorTemplate.arguments_invalid(key, str(e)))
    if not isinstance(parsed, dict):
        reason = f"expected an object, got {type(parsed).__name__}"
        return _EMPTY_ARGS, ArgumentParseError(ErrorTemplate.arguments_invalid(key, reason))
    return parsed, None


@dataclass(frozen=True, slots=True)
class BindingTarget:
    """Association between one element and its translation.

    Discovered fresh on every pass, never cached: argument attributes may
    change between passes.

    Attributes:
        element: Element to write to
        key: Translation key read from the marker attribute
        target: Where the resolved string is written
        args: Parsed argument bag
    """

    element: TranslatableElement
    key: TranslationKey
    target: TargetProperty
    args: Mapping[str, object]


@dataclass(frozen=True, slots=True)
class ApplyReport:
    """Outcome of one binding pass.

    Attributes:
        translated: Elements written to
        skipped: Marked elements whose key is absent from the table
        errors: Element-level errors, in document order
    """

    translated: int = 0
    skipped: int = 0
    errors: tuple[BindingError, ...] = ()

    @property
    def has_errors(self) -> bool:
        """Check if any element-level error occurred."""
        return len(self.errors) > 0


class BindingApplier:
    """Writes resolved translations into a document.

    Example:
        >>> doc = EtreeDocument.from_string('<p data-l10n-id="hi">x</p>')
        >>> report = BindingApplier(doc).apply({"hi": "Hello"})
        >>> doc.tostring()
        '<p data-l10n-id="hi">Hello</p>'
    """

    __slots__ = ("_config", "_document")

    def __init__(self, document: DocumentAccess, config: BindingConfig | None = None) -> None:
        """Initialize applier.

        Args:
            document: Document access collaborator
            config: Markup contract (defaults if omitted)
        """
        self._document = document
        self._config = config if config is not None else BindingConfig()

    @property
    def config(self) -> BindingConfig:
        """Markup contract in use."""
        return self._config

    def apply(
        self, table: EffectiveTable, root: TranslatableElement | None = None
    ) -> ApplyReport:
        """Translate every marked element under root (inclusive).

        Args:
            table: Effective table
            root: Subtree to translate (document element if omitted)

        Returns:
            ApplyReport with counts and element-level errors
        """
        if root is None:
            root = self._document.root

        translated = 0
        skipped = 0
        errors: list[BindingError] = []

        # Collected up front: innerHTML targets replace children mid-pass
        marked = list(self._document.find_marked(root, self._config.key_attribute))
        for element in marked:
            binding = self._bind(element, table, errors)
            if binding is None:
                skipped += 1
                continue
            if self.apply_binding(binding, table, errors):
                translated += 1

        return ApplyReport(translated=translated, skipped=skipped, errors=tuple(errors))

    def _bind(
        self,
        element: TranslatableElement,
        table: EffectiveTable,
        errors: list[BindingError],
    ) -> BindingTarget | None:
        """Build the binding for an element, or None when its key is untranslated."""
        key = element.get_attribute(self._config.key_attribute)
        if not key or key not in table:
            return None

        args, error = parse_arguments(element.get_attribute(self._config.args_attribute), key)
        if error is not None:
            logger.warning("%s", error)
            errors.append(error)

        return BindingTarget(
            element=element,
            key=key,
            target=target_for_key(key, self._config.attribute_whitelist),
            args=args,
        )

    def apply_binding(
        self,
        binding: BindingTarget,
        table: EffectiveTable,
        errors: list[BindingError],
    ) -> bool:
        """Resolve and write one binding.

        Args:
            binding: Element binding
            table: Effective table
            errors: Mutable error list receiving element-level errors

        Returns:
            True if the element was written to
        """
        text, resolve_errors = resolve_placeholders(table[binding.key], binding.args, table)
        errors.extend(e for e in resolve_errors if isinstance(e, BindingError))

        element = binding.element
        match binding.target:
            case target if target.is_attribute:
                element.set_attribute(target.value, text)
            case TargetProperty.INNER_HTML:
                element.set_inner_html(text)
            case TargetProperty.TEXT_CONTENT if element.has_child_elements():
                return self._write_text_nodes(binding, text, errors)
            case TargetProperty.TEXT_CONTENT:
                element.set_text_content(text)
        return True

    @staticmethod
    def _write_text_nodes(
        binding: BindingTarget, text: str, errors: list[BindingError]
    ) -> bool:
        """Overwrite the first non-blank text node; blank the other non-blank ones.

        Child elements are left untouched.
        """
        candidates = [node for node in binding.element.text_nodes() if node.value.strip()]
        if not candidates:
            error = NoTranslatableTextError(ErrorTemplate.no_translatable_text(binding.key))
            logger.warning("%s", error)
            errors.append(error)
            return False

        first, *rest = candidates
        first.value = text
        for node in rest:
            node.value = ""
        return True


def apply_bindings(
    table: EffectiveTable,
    root: TranslatableElement | None,
    document: DocumentAccess,
    config: BindingConfig | None = None,
) -> ApplyReport:
    """Translate every marked element under root (inclusive).

    Convenience wrapper for one-off passes; see BindingApplier.apply().
    """
    return BindingApplier(document, config).apply(table, root)
