"""Collaborator protocols consumed by the class documentation extractor."""

from __future__ import annotations

from typing import Protocol

from classdoc.model import FallbackDoc, MethodInfo, ParsedDocblock


class DocblockReader(Protocol):
    """Protocol for docblock tag readers."""

    def parse(self, raw_comment: str | None) -> ParsedDocblock:
        """Return summary, description and tags of *raw_comment*.

        Malformed tags are returned with ``valid=False`` instead of raising.
        """
        ...


class ClassMetadataSource(Protocol):
    """Protocol for class metadata sources."""

    def public_methods(self, class_name: str) -> list[MethodInfo]:
        """Return the public methods declared on *class_name*, in order."""
        ...

    def parent_of(self, class_name: str) -> str | None:
        """Return the direct parent class of *class_name*, if any."""
        ...

    def interfaces_of(self, class_name: str) -> list[str]:
        """Return the interfaces *class_name* directly implements."""
        ...

    def raw_class_comment(self, class_name: str) -> str | None:
        """Return the raw docblock attached to *class_name*."""
        ...


class FallbackLookup(Protocol):
    """Protocol for documentation lookups used when a method has no docblock."""

    def lookup(self, method_id: str) -> FallbackDoc:
        """Return a short description and canonical link for *method_id*."""
        ...
