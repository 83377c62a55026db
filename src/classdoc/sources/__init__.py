"""Class metadata sources."""

from __future__ import annotations

from classdoc.sources.inspection import InspectMetadataSource, class_name
from classdoc.sources.table import StaticMetadataSource, UnknownClassError

__all__ = [
    "InspectMetadataSource",
    "StaticMetadataSource",
    "UnknownClassError",
    "class_name",
]
