"""ElementTree implementation of the document access protocols.

Adapts :mod:`xml.etree.ElementTree` trees (XHTML or any well-formed markup)
to DocumentAccess. ElementTree stores text as ``element.text`` and each
child's ``tail``; those slots are exposed as the element's text nodes.

Namespaced documents are supported: tag names are compared by local name
and attributes are expected without a namespace, as in XHTML.

Python 3.13+.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

__all__ = ["EtreeDocument", "EtreeElement", "EtreeTextNode"]

logger = logging.getLogger(__name__)

_FRAGMENT_WRAPPER = "l10n-fragment"


def _local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix."""
    return tag.rpartition("}")[2]


def _is_element(node: ET.Element) -> bool:
    # Comments and processing instructions use callables as tags
    return isinstance(node.tag, str)


@dataclass(slots=True)
class EtreeTextNode:
    """A text slot: an element's leading text or a child's tail.

    Attributes:
        owner: Element holding the slot
        slot: "text" for leading text, "tail" for text following owner
    """

    owner: ET.Element
    slot: Literal["text", "tail"]

    @property
    def value(self) -> str:
        """Current text ('' when the slot is empty)."""
        return (self.owner.text if self.slot == "text" else self.owner.tail) or ""

    @value.setter
    def value(self, new_value: str) -> None:
        if self.slot == "text":
            self.owner.text = new_value
        else:
            self.owner.tail = new_value


@dataclass(frozen=True, slots=True)
class EtreeElement:
    """TranslatableElement backed by an ElementTree element.

    Attributes:
        node: Wrapped element
    """

    node: ET.Element

    def get_attribute(self, name: str) -> str | None:
        return self.node.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.node.set(name, value)

    def has_child_elements(self) -> bool:
        return any(_is_element(child) for child in self.node)

    def text_nodes(self) -> Sequence[EtreeTextNode]:
        nodes = [EtreeTextNode(self.node, "text")]
        nodes.extend(EtreeTextNode(child, "tail") for child in self.node)
        return nodes

    def set_text_content(self, value: str) -> None:
        for child in list(self.node):
            self.node.remove(child)
        self.node.text = value

    def set_inner_html(self, value: str) -> None:
        """Replace content with parsed markup.

        Markup that is not well-formed is inserted as plain text instead.
        """
        try:
            fragment = ET.fromstring(f"<{_FRAGMENT_WRAPPER}>{value}</{_FRAGMENT_WRAPPER}>")
        except ET.ParseError as e:
            logger.warning("innerHTML value is not well-formed, inserting as text: %s", e)
            self.set_text_content(value)
            return
        for child in list(self.node):
            self.node.remove(child)
        self.node.text = fragment.text
        self.node.extend(list(fragment))


class EtreeDocument:
    """DocumentAccess over an ElementTree document.

    Example:
        >>> doc = EtreeDocument.from_string('<p data-l10n-id="hello">Hello</p>')
        >>> [e.get_attribute("data-l10n-id") for e in doc.find_marked(doc.root, "data-l10n-id")]
        ['hello']
    """

    __slots__ = ("_root",)

    def __init__(self, root: ET.Element) -> None:
        """Initialize document.

        Args:
            root: Document element
        """
        self._root = EtreeElement(root)

    @classmethod
    def from_string(cls, markup: str) -> EtreeDocument:
        """Parse well-formed markup into a document.

        Raises:
            xml.etree.ElementTree.ParseError: If markup is not well-formed
        """
        return cls(ET.fromstring(markup))

    @property
    def root(self) -> EtreeElement:
        return self._root

    def find_marked(self, root: EtreeElement, attribute: str) -> Iterator[EtreeElement]:
        for node in root.node.iter():
            if _is_element(node) and node.get(attribute):
                yield EtreeElement(node)

    def resource_links(self, media_type: str) -> list[str]:
        hrefs: list[str] = []
        for node in self._root.node.iter():
            if not _is_element(node) or _local_name(node.tag) != "link":
                continue
            href = node.get("href")
            if node.get("type") == media_type and href:
                hrefs.append(href)
        return hrefs

    def tostring(self) -> str:
        """Serialize the document back to markup."""
        return ET.tostring(self._root.node, encoding="unicode")
