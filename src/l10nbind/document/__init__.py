"""Document access: protocols and the ElementTree adapter.

Python 3.13+.
"""

from .etree import EtreeDocument, EtreeElement, EtreeTextNode
from .protocols import DocumentAccess, TextNode, TranslatableElement

__all__ = [
    "DocumentAccess",
    "EtreeDocument",
    "EtreeElement",
    "EtreeTextNode",
    "TextNode",
    "TranslatableElement",
]
