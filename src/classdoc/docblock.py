"""Read docblock summaries and tags with docstring_parser."""

from __future__ import annotations

import inspect
import logging
import re

from docstring_parser import (
    DocstringParam,
    DocstringRaises,
    DocstringReturns,
    DocstringStyle,
    ParseError,
    parse,
)

from classdoc.model import DocTag, ParsedDocblock

logger = logging.getLogger(__name__)

# Normalized stand-in for a missing docblock.
EMPTY_DOCBLOCK = ""

STYLES = {
    "auto": DocstringStyle.AUTO,
    "epydoc": DocstringStyle.EPYDOC,
    "google": DocstringStyle.GOOGLE,
    "numpydoc": DocstringStyle.NUMPYDOC,
    "rest": DocstringStyle.REST,
}

# Styles whose tags start with a marker at the beginning of a line, so a
# malformed tag can be isolated from its neighbours.
_TAG_MARKERS = {
    DocstringStyle.EPYDOC: "@",
    DocstringStyle.REST: ":",
}

_TAG_ALIASES = {
    "param": "param",
    "parameter": "param",
    "arg": "param",
    "argument": "param",
    "keyword": "param",
    "key": "param",
    "type": "param",
    "return": "return",
    "returns": "return",
    "rtype": "return",
    "raise": "throws",
    "raises": "throws",
    "except": "throws",
    "exception": "throws",
    "throws": "throws",
}


def resolve_style(name: str) -> DocstringStyle:
    """Return the docstring_parser style called *name*."""
    try:
        return STYLES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown docblock style {name!r}; expected one of {', '.join(STYLES)}"
        ) from None


class DocstringReader:
    """Docblock tag reader backed by docstring_parser.

    With the epydoc (default) and reST styles every tag is checked on its
    own, so one malformed tag is reported as invalid while the rest of the
    docblock is still read.  Other styles are parsed in one go and a
    ``ParseError`` propagates to the caller.
    """

    def __init__(self, style: DocstringStyle | str = DocstringStyle.EPYDOC) -> None:
        if isinstance(style, str):
            style = resolve_style(style)
        self.style = style

    def parse(self, raw_comment: str | None) -> ParsedDocblock:
        text = inspect.cleandoc(raw_comment or EMPTY_DOCBLOCK)
        if not text.strip():
            return ParsedDocblock()

        marker = _TAG_MARKERS.get(self.style)
        if marker is None:
            return _to_docblock(parse(text, style=self.style))

        match = re.search(f"^{re.escape(marker)}", text, flags=re.M)
        if match is None:
            return _to_docblock(parse(text, style=self.style))

        head, tail = text[: match.start()], text[match.start() :]
        tags: list[DocTag] = []
        # @type / @rtype seen before the tag they describe
        param_types: dict[str, str] = {}
        return_types: list[str] = []
        for chunk in _split_tags(tail, marker):
            try:
                doc = parse(chunk, style=self.style)
            except ParseError as e:
                logger.debug("Skipping malformed tag %r: %s", chunk.strip(), e)
                tags.append(_invalid_tag(chunk, marker))
                continue

            args, value = _chunk_header(chunk, marker)
            key = args[0].lower() if args else ""
            if key == "type":
                _set_param_type(tags, param_types, args[1:], value)
            elif key == "rtype":
                _set_return_type(tags, return_types, value)
            else:
                tags.extend(_meta_tags(doc.meta, param_types, return_types))

        if param_types:
            logger.debug(
                "Ignoring types of undeclared params: %s", ", ".join(param_types)
            )
        # An @rtype without any @return still documents the return type.
        tags.extend(DocTag(name="return", type=t) for t in return_types)

        docblock = _to_docblock(parse(head, style=self.style))
        docblock.tags = tags
        return docblock


def _split_tags(text: str, marker: str) -> list[str]:
    """Split the tag section of a docblock into one chunk per tag."""
    m = re.escape(marker)
    pattern = rf"(^{m}.*?)(?=^{m}|\Z)"
    chunks = re.finditer(pattern, text, flags=re.S | re.M)
    return [c.group(0) for c in chunks if c.group(0)]


def _chunk_header(chunk: str, marker: str) -> tuple[list[str], str]:
    """Return the words before the first colon of a tag and the text after it."""
    words, _, value = chunk[len(marker) :].partition(":")
    return words.split(), value.strip()


def _set_param_type(
    tags: list[DocTag], pending: dict[str, str], names: list[str], type_name: str
) -> None:
    if len(names) != 1:
        return
    name = names[0]
    for tag in reversed(tags):
        if tag.name == "param" and tag.valid and tag.param_name == name:
            tag.type = type_name
            return
    pending[name] = type_name


def _set_return_type(tags: list[DocTag], pending: list[str], type_name: str) -> None:
    returns = [tag for tag in tags if tag.name == "return"]
    if returns and returns[-1].type is None:
        returns[-1].type = type_name
    else:
        pending.append(type_name)


def _invalid_tag(chunk: str, marker: str) -> DocTag:
    m = re.match(rf"{re.escape(marker)}(\w+)", chunk)
    key = m.group(1).lower() if m else ""
    return DocTag(
        name=_TAG_ALIASES.get(key, key),
        desc=chunk.strip(),
        valid=False,
    )


def _meta_tags(
    meta: list,
    param_types: dict[str, str] | None = None,
    return_types: list[str] | None = None,
) -> list[DocTag]:
    """Convert docstring_parser metadata into tags.

    Types from *param_types* and *return_types* are consumed by the first
    matching untyped tag.
    """
    param_types = {} if param_types is None else param_types
    return_types = [] if return_types is None else return_types
    tags: list[DocTag] = []
    for item in meta:
        if isinstance(item, DocstringParam):
            name = item.arg_name or ""
            type_name = item.type_name or param_types.pop(name, None)
            tags.append(
                DocTag(
                    name="param",
                    type=type_name,
                    param_name=name,
                    desc=item.description or "",
                    valid=name.isidentifier(),
                )
            )
        elif isinstance(item, DocstringReturns):
            if item.is_generator:
                continue
            type_name = item.type_name
            if type_name is None and return_types:
                type_name = return_types.pop(0)
            tags.append(
                DocTag(name="return", type=type_name, desc=item.description or "")
            )
        elif isinstance(item, DocstringRaises):
            tags.append(
                DocTag(name="throws", type=item.type_name, desc=item.description or "")
            )
    return tags


def _to_docblock(doc) -> ParsedDocblock:
    """Convert a docstring_parser ``Docstring`` into a ``ParsedDocblock``."""
    return ParsedDocblock(
        summary=doc.short_description or "",
        description=doc.long_description or "",
        tags=_meta_tags(doc.meta),
    )
