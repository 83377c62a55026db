"""Fallback documentation lookups for methods without a docblock."""

from __future__ import annotations

import inspect
import logging

from classdoc.model import FallbackDoc
from classdoc.sources.inspection import InspectMetadataSource

logger = logging.getLogger(__name__)

DEFAULT_LINK_TEMPLATE = "https://docs.python.org/3/library/{module}.html#{id}"

# Link layout of the PHP manual, for tables describing PHP classes.
PHP_MANUAL_TEMPLATE = "https://secure.php.net/manual/en/{cls_lower}.{name_lower}.php"


def link_fields(method_id: str) -> dict[str, str]:
    """Split ``"<module>.<Class>.<method>"`` into template fields."""
    owner, _, name = method_id.rpartition(".")
    module, _, cls = owner.rpartition(".")
    fields = {
        "id": method_id,
        "owner": owner,
        "module": module,
        "cls": cls or owner,
        "name": name,
    }
    fields.update({f"{k}_lower": v.lower() for k, v in list(fields.items())})
    return fields


class LinkTemplateLookup:
    """Build a documentation link from a URL template, offline.

    No description is known for the method, so ``short_description`` is
    always ``None``.
    """

    def __init__(self, template: str = DEFAULT_LINK_TEMPLATE) -> None:
        self.template = template

    def link_for(self, method_id: str) -> str:
        try:
            return self.template.format_map(link_fields(method_id))
        except KeyError as e:
            raise ValueError(
                f"Unknown field {e} in link template {self.template!r}"
            ) from None

    def lookup(self, method_id: str) -> FallbackDoc:
        return FallbackDoc(short_description=None, link=self.link_for(method_id))


class InheritedDocLookup(LinkTemplateLookup):
    """Describe a method with the docstring it inherits from its bases.

    :func:`inspect.getdoc` walks the MRO, so a method overriding a documented
    abstract or base-class method gets that method's first docstring line.
    """

    def __init__(
        self, source: InspectMetadataSource, template: str = DEFAULT_LINK_TEMPLATE
    ) -> None:
        super().__init__(template)
        self.source = source

    def lookup(self, method_id: str) -> FallbackDoc:
        doc = inspect.getdoc(self.source.resolve_method(method_id))
        short = doc.strip().split("\n", 1)[0] if doc else None
        logger.debug("Fallback for %s: %r", method_id, short)
        return FallbackDoc(short_description=short or None, link=self.link_for(method_id))
