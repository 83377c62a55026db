"""Extract normalized documentation models from classes and their docblocks."""

from __future__ import annotations

from classdoc.docblock import DocstringReader
from classdoc.extractors import ClassDocExtractor
from classdoc.lookup import InheritedDocLookup, LinkTemplateLookup
from classdoc.model import ClassDescription, ClassDocumentation, MethodDetail
from classdoc.sources import InspectMetadataSource, StaticMetadataSource

__all__ = [
    "ClassDescription",
    "ClassDocExtractor",
    "ClassDocumentation",
    "DocstringReader",
    "InheritedDocLookup",
    "InspectMetadataSource",
    "LinkTemplateLookup",
    "MethodDetail",
    "StaticMetadataSource",
]
