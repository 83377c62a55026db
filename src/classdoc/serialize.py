"""Serialize a ClassDocumentation into the JSON shape read by renderers."""

from __future__ import annotations

import json

from classdoc.model import ClassDocumentation, MethodDetail, TagDatum


def _tags_to_list(tags: list[TagDatum] | None) -> list[dict] | None:
    if tags is None:
        return None
    return [{"desc": t.desc, "type": t.type} for t in tags]


def method_to_dict(detail: MethodDetail) -> dict:
    d: dict = {
        "shortDescription": detail.short_description,
        "longDescription": detail.long_description,
        "argumentsList": list(detail.arguments_list),
        "argumentsDescription": None,
        "returnValue": _tags_to_list(detail.return_value),
        "throwsExceptions": _tags_to_list(detail.throws_exceptions),
        "visibility": detail.visibility,
    }
    if detail.arguments_description is not None:
        d["argumentsDescription"] = [
            {"name": p.name, "desc": p.desc, "type": p.type}
            for p in detail.arguments_description
        ]
    if detail.doclink is not None:
        d["doclink"] = detail.doclink
    return d


def documentation_to_dict(doc: ClassDocumentation) -> dict:
    """Return *doc* as plain dicts and lists."""
    return {
        "className": doc.class_name,
        "description": {"short": doc.description.short, "long": doc.description.long},
        "parent": doc.parent,
        "interfaces": list(doc.interfaces),
        "methods": {k: method_to_dict(v) for k, v in doc.methods.items()},
        "inheritedMethods": {
            k: method_to_dict(v) for k, v in doc.inherited_methods.items()
        },
    }


def documentation_to_json(docs: list[ClassDocumentation], indent: int | None = 2) -> str:
    data = {"classes": {d.class_name: documentation_to_dict(d) for d in docs}}
    return json.dumps(data, indent=indent)
