"""Build the documentation model of a class from its metadata and docblocks."""

from __future__ import annotations

import logging

from classdoc.extractors.base import ClassMetadataSource, DocblockReader, FallbackLookup
from classdoc.model import (
    UNTYPED,
    ClassDescription,
    ClassDocumentation,
    DocTag,
    MethodDetail,
    MethodInfo,
    ParameterDescription,
    TagDatum,
)

logger = logging.getLogger(__name__)


class ClassDocExtractor:
    """Extract descriptions, parent, interfaces and method details of a class.

    Inherited methods are taken from the direct parent only; methods that a
    grandparent declares are not surfaced.
    """

    def __init__(
        self,
        class_name: str,
        source: ClassMetadataSource,
        reader: DocblockReader,
        lookup: FallbackLookup,
    ) -> None:
        self.class_name = class_name
        self.source = source
        self.reader = reader
        self.lookup = lookup

    def get_class_description(self) -> ClassDescription:
        docblock = self.reader.parse(self.source.raw_class_comment(self.class_name))
        return ClassDescription(short=docblock.summary, long=docblock.description)

    def get_parent_class_name(self) -> str | None:
        return self.source.parent_of(self.class_name)

    def get_interfaces(self) -> list[str]:
        return list(self.source.interfaces_of(self.class_name))

    def get_methods_details(self) -> dict[str, MethodDetail]:
        """Return details of the class's own public methods.

        Any method whose name the parent also declares is left out, whatever
        its signature or docblock.
        """
        return self._own_methods(self.get_inherited_methods())

    def get_inherited_methods(self) -> dict[str, MethodDetail]:
        """Return details of the parent's public methods, sorted by name."""
        parent = self.get_parent_class_name()
        if parent is None:
            return {}

        methods = {
            method.name: self._method_details(method)
            for method in self.source.public_methods(parent)
        }
        return dict(sorted(methods.items()))

    def extract(self) -> ClassDocumentation:
        """Return the complete documentation model of the class."""
        inherited = self.get_inherited_methods()
        return ClassDocumentation(
            class_name=self.class_name,
            description=self.get_class_description(),
            parent=self.get_parent_class_name(),
            interfaces=self.get_interfaces(),
            methods=self._own_methods(inherited),
            inherited_methods=inherited,
        )

    def _own_methods(
        self, inherited: dict[str, MethodDetail]
    ) -> dict[str, MethodDetail]:
        methods: dict[str, MethodDetail] = {}
        for method in self.source.public_methods(self.class_name):
            if method.name in inherited:
                continue
            methods[method.name] = self._method_details(method)
        return methods

    def _method_details(self, method: MethodInfo) -> MethodDetail:
        docblock = self.reader.parse(method.raw_comment)

        if not docblock.summary:
            method_id = f"{method.declaring_class}.{method.name}"
            logger.debug("No docblock summary for %s, using fallback lookup", method_id)
            fallback = self.lookup.lookup(method_id)
            return MethodDetail(
                short_description=fallback.short_description,
                doclink=fallback.link,
            )

        params = _valid(docblock.tags_by_name("param"))
        return MethodDetail(
            short_description=docblock.summary,
            long_description=docblock.description,
            arguments_list=[f"{_type(tag)} ${tag.param_name}" for tag in params],
            arguments_description=[
                ParameterDescription(
                    name=f"${tag.param_name}", type=_type(tag), desc=tag.desc
                )
                for tag in params
            ],
            return_value=_tag_data(docblock.tags_by_name("return")),
            throws_exceptions=_tag_data(docblock.tags_by_name("throws")),
            visibility=visibility(method),
        )


def visibility(method: MethodInfo) -> str:
    """Return ``"[final ]public[ static]"`` for *method*."""
    return "".join(
        [
            "final " if method.is_final else "",
            "public",
            " static" if method.is_static else "",
        ]
    )


def _valid(tags: list[DocTag]) -> list[DocTag]:
    return [tag for tag in tags if tag.valid]


def _type(tag: DocTag) -> str:
    return tag.type or UNTYPED


def _tag_data(tags: list[DocTag]) -> list[TagDatum]:
    return [TagDatum(type=_type(tag), desc=tag.desc) for tag in _valid(tags)]
