"""Document access protocols.

The binding layer never walks markup itself. It talks to these structural
interfaces, so any document model (ElementTree, lxml, a browser bridge) can
be plugged in by implementing three small protocols.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

__all__ = ["DocumentAccess", "TextNode", "TranslatableElement"]


class TextNode(Protocol):
    """A text-only child node whose value can be rewritten in place."""

    value: str


class TranslatableElement(Protocol):
    """An element that may carry a translation key."""

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None when absent."""
        ...

    def set_attribute(self, name: str, value: str) -> None:
        """Set an attribute value."""
        ...

    def has_child_elements(self) -> bool:
        """Check if the element contains element children (not only text)."""
        ...

    def text_nodes(self) -> Sequence[TextNode]:
        """Return the element's direct text-only children in document order."""
        ...

    def set_text_content(self, value: str) -> None:
        """Replace all content with plain text."""
        ...

    def set_inner_html(self, value: str) -> None:
        """Replace all content with a parsed markup fragment."""
        ...


class DocumentAccess(Protocol):
    """Traversal capability supplied by the host document model."""

    @property
    def root(self) -> TranslatableElement:
        """Document element."""
        ...

    def find_marked(
        self, root: TranslatableElement, attribute: str
    ) -> Iterable[TranslatableElement]:
        """Yield root and its descendants carrying a non-empty attribute.

        Args:
            root: Subtree root (included in the search)
            attribute: Marker attribute name
        """
        ...

    def resource_links(self, media_type: str) -> Sequence[str]:
        """Return hrefs of <link> elements whose type equals media_type, in order."""
        ...
