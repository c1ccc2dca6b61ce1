"""
Blockdata DOM Module.

Provides selector-scoped DOM queries and node serialization.
"""

from blockdata.dom.query import FRAGMENT_FORMATTER, DomQuery
from blockdata.dom.serializer import NodeSerializer

__all__ = [
    "DomQuery",
    "FRAGMENT_FORMATTER",
    "NodeSerializer",
]
