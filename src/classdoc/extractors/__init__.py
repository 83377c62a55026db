"""Class documentation extractor and its collaborator protocols."""

from __future__ import annotations

from classdoc.extractors.base import ClassMetadataSource, DocblockReader, FallbackLookup
from classdoc.extractors.classes import ClassDocExtractor

__all__ = [
    "ClassDocExtractor",
    "ClassMetadataSource",
    "DocblockReader",
    "FallbackLookup",
]
