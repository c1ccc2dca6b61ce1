"""
Blockdata Sourcing Module.

Resolves block attributes from inner HTML according to registry definitions.
"""

from blockdata.sourcing.attributes import AttributeResolver
from blockdata.sourcing.blocks import BlockSourcer, SourcingState

__all__ = [
    "AttributeResolver",
    "BlockSourcer",
    "SourcingState",
]
