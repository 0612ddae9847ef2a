"""Content accessor contracts.

Submodules:
    protocols - StructuredContent, ResourceMetadata, ContentDefinition, ContentLink
    memory    - MappingContent, StaticMetadata (in-memory implementations)

Python 3.13+. Zero external dependencies.
"""

from .memory import MappingContent, StaticMetadata
from .protocols import (
    ContentDefinition,
    ContentLink,
    ContentScalar,
    ContentValue,
    ResourceMetadata,
    StructuredContent,
)

__all__ = [
    "ContentDefinition",
    "ContentLink",
    "ContentScalar",
    "ContentValue",
    "MappingContent",
    "ResourceMetadata",
    "StaticMetadata",
    "StructuredContent",
]
