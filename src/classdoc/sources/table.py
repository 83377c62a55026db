"""Class metadata from a precomputed table (mapping or TOML file)."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from classdoc.model import MethodInfo


class UnknownClassError(LookupError):
    """Raised when a class is not present in the metadata table."""


@dataclass
class ClassRecord:
    """Metadata for one class in the table."""

    parent: str | None = None
    interfaces: list[str] = field(default_factory=list)
    doc: str | None = None
    methods: list[MethodInfo] = field(default_factory=list)


def _record(name: str, data: Mapping) -> ClassRecord:
    methods = [
        MethodInfo(
            name=m["name"],
            declaring_class=name,
            is_static=bool(m.get("static", False)),
            is_final=bool(m.get("final", False)),
            raw_comment=m.get("doc"),
        )
        for m in data.get("methods", [])
    ]
    return ClassRecord(
        parent=data.get("parent"),
        interfaces=list(data.get("interfaces", [])),
        doc=data.get("doc"),
        methods=methods,
    )


class StaticMetadataSource:
    """Serve class metadata from a statically built table.

    The table maps class names to ``parent``, ``interfaces``, ``doc`` and a
    list of ``methods`` (``name``, ``static``, ``final``, ``doc``).  Only
    public methods belong in the table.
    """

    def __init__(self, classes: Mapping[str, Mapping]) -> None:
        self._records = {name: _record(name, data) for name, data in classes.items()}

    @classmethod
    def from_toml(cls, path: Path) -> StaticMetadataSource:
        """Load a table from the ``[classes]`` section of a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls(data.get("classes", {}))

    def _get(self, class_name: str) -> ClassRecord:
        try:
            return self._records[class_name]
        except KeyError:
            raise UnknownClassError(class_name) from None

    def public_methods(self, class_name: str) -> list[MethodInfo]:
        return list(self._get(class_name).methods)

    def parent_of(self, class_name: str) -> str | None:
        return self._get(class_name).parent

    def interfaces_of(self, class_name: str) -> list[str]:
        return list(self._get(class_name).interfaces)

    def raw_class_comment(self, class_name: str) -> str | None:
        return self._get(class_name).doc
