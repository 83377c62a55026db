"""Shared fixtures and test doubles for classdoc tests."""

from __future__ import annotations

import pytest

from classdoc.docblock import DocstringReader
from classdoc.model import FallbackDoc


class RecordingLookup:
    """Fallback lookup that remembers which methods it was asked about."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def lookup(self, method_id: str) -> FallbackDoc:
        self.calls.append(method_id)
        return FallbackDoc(
            short_description=f"Looked up {method_id}.",
            link=f"https://docs.example/{method_id}",
        )


class FailingReader:
    """Tag reader that always fails."""

    def parse(self, raw_comment):
        raise RuntimeError("reader exploded")


@pytest.fixture
def reader():
    return DocstringReader()


@pytest.fixture
def lookup():
    return RecordingLookup()
