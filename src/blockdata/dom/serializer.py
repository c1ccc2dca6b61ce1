"""
Node Serializer - Plain data representation of DOM nodes.

Converts parsed DOM nodes into strings (text) and ``{type, children}``
dictionaries (elements) for the ``node`` and ``children`` attribute sources.
"""

from typing import Any

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString


class NodeSerializer:
    """Serializes DOM nodes recursively."""

    def serialize(self, node: PageElement) -> str | dict[str, Any] | None:
        """
        Serialize a node.

        Returns:
            Stripped text for text nodes (None if whitespace-only),
            ``{"type": tag, "children": [...]}`` for elements,
            None for comments, doctypes and other node kinds
        """
        if isinstance(node, Tag):
            return self._serialize_element(node)

        # Comments, doctypes and CDATA are NavigableString subclasses too
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            text = str(node).strip()
            return text or None

        return None

    def _serialize_element(self, node: Tag) -> dict[str, Any]:
        children = []
        for child in node.children:
            value = self.serialize(child)
            if value is not None:
                children.append(value)

        return {"type": node.name, "children": children}
