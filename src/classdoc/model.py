"""Language-agnostic data model for extracted class documentation."""

from __future__ import annotations

from dataclasses import dataclass, field

# Type rendered for tags that declare none.
UNTYPED = "mixed"


@dataclass(frozen=True)
class ClassDescription:
    """Summary and long description of a class docblock."""

    short: str = ""
    long: str = ""


@dataclass
class ParameterDescription:
    """One valid ``@param`` tag."""

    name: str  # "$" + parameter name
    type: str
    desc: str


@dataclass
class TagDatum:
    """Type and description of a ``@return`` or ``@throws`` tag."""

    type: str
    desc: str


@dataclass
class MethodDetail:
    """Documentation facts for one public method.

    Filled either from the method's docblock, or (when it has no summary)
    from the fallback lookup, which only sets ``short_description`` and
    ``doclink``.
    """

    short_description: str | None = None
    long_description: str | None = None
    arguments_list: list[str] = field(default_factory=list)
    arguments_description: list[ParameterDescription] | None = None
    return_value: list[TagDatum] | None = None
    throws_exceptions: list[TagDatum] | None = None
    visibility: str | None = None  # "final public static", ...
    doclink: str | None = None


@dataclass
class ClassDocumentation:
    """Everything extracted for a single class."""

    class_name: str
    description: ClassDescription
    parent: str | None = None
    interfaces: list[str] = field(default_factory=list)
    methods: dict[str, MethodDetail] = field(default_factory=dict)
    inherited_methods: dict[str, MethodDetail] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Collaborator records
# ---------------------------------------------------------------------------


@dataclass
class DocTag:
    """A single tag read from a docblock."""

    name: str  # "param", "return", "throws"
    type: str | None = None
    param_name: str | None = None
    desc: str = ""
    valid: bool = True


@dataclass
class ParsedDocblock:
    """Summary, description and tags of a docblock."""

    summary: str = ""
    description: str = ""
    tags: list[DocTag] = field(default_factory=list)

    def tags_by_name(self, name: str) -> list[DocTag]:
        return [tag for tag in self.tags if tag.name == name]


@dataclass
class MethodInfo:
    """A public method as reported by a class metadata source."""

    name: str
    declaring_class: str
    is_static: bool = False
    is_final: bool = False
    raw_comment: str | None = None


@dataclass
class FallbackDoc:
    """Best-effort documentation for a method without a docblock."""

    short_description: str | None
    link: str
