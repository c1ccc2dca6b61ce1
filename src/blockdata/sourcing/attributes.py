"""
Attribute Resolver - Sources one attribute value from a DOM scope.

Each ``AttributeSource`` maps to one handler. A handler returns None when
it finds nothing; ``resolve`` then falls back to the definition's default.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any

from blockdata.dom import DomQuery, NodeSerializer
from blockdata.meta import EmptyMetaStore, MetaStore
from blockdata.models import AttributeDefinition, AttributeSource

logger = logging.getLogger(__name__)

SourceHandler = Callable[[DomQuery, AttributeDefinition, int | None], Any]


class AttributeResolver:
    """
    Resolves attribute definitions against a DOM scope.

    Usage:
        resolver = AttributeResolver()
        scope = DomQuery.from_fragment('<p><a href="/x">x</a></p>')
        definition = AttributeDefinition(source="attribute", selector="a", attribute="href")
        resolver.resolve(scope, definition)  # "/x"
    """

    def __init__(
        self,
        meta_store: MetaStore | None = None,
        serializer: NodeSerializer | None = None,
    ):
        self._meta_store = meta_store or EmptyMetaStore()
        self._serializer = serializer or NodeSerializer()
        self._handlers: dict[AttributeSource, SourceHandler] = {
            AttributeSource.ATTRIBUTE: self._source_attribute,
            AttributeSource.PROPERTY: self._source_attribute,
            AttributeSource.HTML: self._source_html,
            AttributeSource.RICH_TEXT: self._source_html,
            AttributeSource.TEXT: self._source_text,
            AttributeSource.TAG: self._source_tag,
            AttributeSource.RAW: self._source_raw,
            AttributeSource.QUERY: self._source_query,
            AttributeSource.META: self._source_meta,
            AttributeSource.NODE: self._source_node,
            AttributeSource.CHILDREN: self._source_children,
        }

    def resolve(
        self,
        scope: DomQuery,
        definition: AttributeDefinition,
        post_id: int | None = None,
    ) -> Any:
        """
        Resolve a single attribute.

        Args:
            scope: DOM scope to query
            definition: Attribute definition from the registry
            post_id: Current post, used by ``meta`` sources

        Returns:
            The sourced value, else the definition default (may be None)
        """
        value = None

        if definition.source is not None:
            handler = self._handlers[definition.source]
            value = handler(scope, definition, post_id)

        if value is None:
            value = copy.deepcopy(definition.default)

        return value

    def _scope(self, scope: DomQuery, definition: AttributeDefinition) -> DomQuery:
        if definition.selector is not None:
            return scope.filter(definition.selector)
        return scope

    def _source_attribute(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> str | None:
        scope = self._scope(scope, definition)
        if scope.count() == 0 or definition.attribute is None:
            return None
        return scope.attr(definition.attribute)

    def _source_html(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> str | None:
        scope = self._scope(scope, definition)
        if scope.count() == 0:
            return None

        if definition.multiline is None or definition.source is AttributeSource.RICH_TEXT:
            return scope.html()

        parts = [line.outer_html() for line in scope.each(definition.multiline)]
        return "".join(parts)

    def _source_text(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> str | None:
        return self._scope(scope, definition).text()

    def _source_tag(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> str | None:
        return self._scope(scope, definition).tag_name()

    def _source_raw(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> str | None:
        # The selector is not applied; raw always reads the whole scope
        html = scope.html()
        return html.strip() if html is not None else None

    def _source_query(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> list[dict[str, Any]]:
        items = definition.query or {}
        records = []

        for match in self._scope(scope, definition).each():
            record = {}
            for name, item in items.items():
                value = self.resolve(match, item, post_id)
                if value is not None:
                    record[name] = value
            records.append(record)

        return records

    def _source_meta(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> Any:
        if post_id is None or definition.meta is None:
            return None

        if not self._meta_store.exists(post_id, definition.meta):
            logger.debug(f"No meta {definition.meta!r} for post {post_id}")
            return None

        return self._meta_store.get(post_id, definition.meta)

    def _source_node(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> Any:
        node = self._scope(scope, definition).first_node()
        if node is None:
            return None
        return self._serializer.serialize(node)

    def _source_children(
        self, scope: DomQuery, definition: AttributeDefinition, post_id: int | None
    ) -> list[Any]:
        scope = self._scope(scope, definition)
        if scope.count() == 0:
            return []

        if scope.children().count() == 0:
            # A single text value, kept as-is
            return [scope.text(normalize_whitespace=False)]

        values = []
        for child in scope.child_nodes():
            value = self._serializer.serialize(child)
            if value is not None:
                values.append(value)
        return values
