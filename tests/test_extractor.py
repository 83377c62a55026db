"""Tests for the class documentation extractor."""

import pytest

from classdoc.extractors import ClassDocExtractor
from classdoc.model import ClassDescription, ParameterDescription, TagDatum
from classdoc.sources import StaticMetadataSource, UnknownClassError

from conftest import FailingReader

GREET_DOC = """Greets someone.

@param name: Description one
@type name: string
@param broken
"""

TABLE = {
    "app.Bag": {
        "interfaces": ["Countable"],
        "doc": "A bag of items.\n\nItems are kept in insertion order.",
        "methods": [
            {
                "name": "count",
                "doc": "Counts items.\n\n@return: The count.\n@rtype: int",
            },
            {"name": "greet", "doc": GREET_DOC},
            {"name": "size"},
        ],
    },
    "app.Root": {
        "methods": [{"name": "root_only", "doc": "Only on the root."}],
    },
    "app.Base": {
        "parent": "app.Root",
        "doc": "Base record.",
        "methods": [
            {"name": "save", "doc": "Saves the record."},
            {"name": "zeta", "doc": "Last one."},
            {"name": "alpha", "doc": "First one."},
            {"name": "mid"},
        ],
    },
    "app.Child": {
        "parent": "app.Base",
        "interfaces": ["Stringable", "JsonSerializable"],
        "methods": [
            {"name": "save"},
            {"name": "load", "doc": "Loads the record.\n\n@raise IOError: on failure"},
        ],
    },
}


@pytest.fixture
def source():
    return StaticMetadataSource(TABLE)


def _extractor(name, source, reader, lookup):
    return ClassDocExtractor(name, source, reader, lookup)


def test_class_without_parent(source, reader, lookup):
    ext = _extractor("app.Bag", source, reader, lookup)

    assert ext.get_parent_class_name() is None
    assert ext.get_interfaces() == ["Countable"]
    assert ext.get_inherited_methods() == {}

    count = ext.get_methods_details()["count"]
    assert count.short_description == "Counts items."
    assert count.arguments_list == []
    assert count.return_value == [TagDatum(type="int", desc="The count.")]
    assert count.visibility == "public"
    assert count.doclink is None


def test_class_description(source, reader, lookup):
    desc = _extractor("app.Bag", source, reader, lookup).get_class_description()
    assert desc == ClassDescription(
        short="A bag of items.", long="Items are kept in insertion order."
    )


def test_class_description_without_docblock(source, reader, lookup):
    desc = _extractor("app.Root", source, reader, lookup).get_class_description()
    assert desc == ClassDescription(short="", long="")


def test_interfaces_keep_source_order(source, reader, lookup):
    ext = _extractor("app.Child", source, reader, lookup)
    assert ext.get_interfaces() == ["Stringable", "JsonSerializable"]


def test_invalid_param_is_dropped(source, reader, lookup):
    greet = _extractor("app.Bag", source, reader, lookup).get_methods_details()["greet"]

    assert greet.arguments_list == ["string $name"]
    assert greet.arguments_description == [
        ParameterDescription(name="$name", type="string", desc="Description one")
    ]
    assert greet.long_description == ""
    assert greet.return_value == []
    assert greet.throws_exceptions == []


def test_params_keep_declaration_order(reader, lookup):
    doc = """Moves things.

    @param b: second letter
    @param: no name
    @param a: first letter
    @type a: int
    @param x y z
    """
    source = StaticMetadataSource({"m.M": {"methods": [{"name": "move", "doc": doc}]}})
    move = _extractor("m.M", source, reader, lookup).get_methods_details()["move"]

    assert move.arguments_list == ["mixed $b", "int $a"]
    assert [p.name for p in move.arguments_description] == ["$b", "$a"]


def test_fallback_without_docblock(source, reader, lookup):
    size = _extractor("app.Bag", source, reader, lookup).get_methods_details()["size"]

    assert lookup.calls == ["app.Bag.size"]
    assert size.short_description == "Looked up app.Bag.size."
    assert size.doclink == "https://docs.example/app.Bag.size"
    assert size.arguments_list == []
    assert size.arguments_description is None
    assert size.return_value is None
    assert size.throws_exceptions is None
    assert size.visibility is None
    assert size.long_description is None


def test_redeclared_method_is_absorbed_by_parent(source, reader, lookup):
    ext = _extractor("app.Child", source, reader, lookup)
    methods = ext.get_methods_details()
    inherited = ext.get_inherited_methods()

    assert "save" not in methods
    assert inherited["save"].short_description == "Saves the record."
    assert "app.Child.save" not in lookup.calls
    assert methods["load"].throws_exceptions == [
        TagDatum(type="IOError", desc="on failure")
    ]


def test_inherited_methods_never_in_own_methods(source, reader, lookup):
    for name in TABLE:
        ext = _extractor(name, source, reader, lookup)
        assert not set(ext.get_inherited_methods()) & set(ext.get_methods_details())


def test_inherited_methods_sorted_and_idempotent(source, reader, lookup):
    ext = _extractor("app.Child", source, reader, lookup)
    first = ext.get_inherited_methods()
    second = ext.get_inherited_methods()

    assert list(first) == ["alpha", "mid", "save", "zeta"]
    assert first == second
    assert list(first) == list(second)


def test_inherited_fallback_uses_declaring_class(source, reader, lookup):
    mid = _extractor("app.Child", source, reader, lookup).get_inherited_methods()["mid"]
    assert mid.doclink == "https://docs.example/app.Base.mid"


def test_grandparent_methods_are_not_surfaced(source, reader, lookup):
    ext = _extractor("app.Child", source, reader, lookup)
    assert "root_only" not in ext.get_inherited_methods()
    assert "root_only" not in ext.get_methods_details()


def test_own_methods_keep_declaration_order(source, reader, lookup):
    methods = _extractor("app.Bag", source, reader, lookup).get_methods_details()
    assert list(methods) == ["count", "greet", "size"]


def test_visibility_combinations(reader, lookup):
    methods = [
        {"name": "plain"},
        {"name": "shared", "static": True},
        {"name": "locked", "final": True},
        {"name": "both", "static": True, "final": True},
    ]
    for m in methods:
        m["doc"] = "Does something."
    source = StaticMetadataSource({"v.V": {"methods": methods}})
    details = _extractor("v.V", source, reader, lookup).get_methods_details()

    assert {k: v.visibility for k, v in details.items()} == {
        "plain": "public",
        "shared": "public static",
        "locked": "final public",
        "both": "final public static",
    }


def test_extract_builds_whole_model(source, reader, lookup):
    doc = _extractor("app.Child", source, reader, lookup).extract()

    assert doc.class_name == "app.Child"
    assert doc.parent == "app.Base"
    assert doc.description == ClassDescription()
    assert list(doc.methods) == ["load"]
    assert list(doc.inherited_methods) == ["alpha", "mid", "save", "zeta"]


def test_unknown_class_propagates(source, reader, lookup):
    with pytest.raises(UnknownClassError):
        _extractor("app.Missing", source, reader, lookup).get_methods_details()


def test_unknown_parent_propagates(reader, lookup):
    source = StaticMetadataSource({"a.A": {"parent": "a.Gone"}})
    with pytest.raises(UnknownClassError):
        _extractor("a.A", source, reader, lookup).get_inherited_methods()


def test_reader_failure_propagates(source, lookup):
    with pytest.raises(RuntimeError, match="reader exploded"):
        _extractor("app.Bag", source, FailingReader(), lookup).get_class_description()


def test_repeated_return_and_param_tags(reader, lookup):
    doc = """Reads.

    @param a: one
    @type a: int
    @param a: two
    @type ghost: int
    @return: first
    @rtype: int
    @return: second
    """
    source = StaticMetadataSource({"r.R": {"methods": [{"name": "read", "doc": doc}]}})
    read = _extractor("r.R", source, reader, lookup).get_methods_details()["read"]

    assert read.arguments_list == ["int $a", "mixed $a"]
    assert len(read.arguments_description) == 2
    assert read.return_value == [
        TagDatum(type="int", desc="first"),
        TagDatum(type="mixed", desc="second"),
    ]
