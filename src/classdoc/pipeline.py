"""Orchestrator: configure → extract → serialize."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from classdoc.config import ClassdocConfig, load_config
from classdoc.docblock import DocstringReader
from classdoc.extractors import (
    ClassDocExtractor,
    ClassMetadataSource,
    DocblockReader,
    FallbackLookup,
)
from classdoc.lookup import InheritedDocLookup, LinkTemplateLookup
from classdoc.model import ClassDocumentation
from classdoc.serialize import documentation_to_json
from classdoc.sources import InspectMetadataSource, StaticMetadataSource

logger = logging.getLogger(__name__)


def build_collaborators(
    config: ClassdocConfig, table: Path | None = None
) -> tuple[ClassMetadataSource, DocblockReader, FallbackLookup]:
    """Return the metadata source, tag reader and fallback lookup for *config*."""
    reader = DocstringReader(config.style)
    if table is not None:
        logger.debug("Reading class metadata from %s", table)
        return (
            StaticMetadataSource.from_toml(table),
            reader,
            LinkTemplateLookup(config.link_template),
        )

    source = InspectMetadataSource()
    return source, reader, InheritedDocLookup(source, config.link_template)


def extract_all(
    targets: Iterable[str],
    source: ClassMetadataSource,
    reader: DocblockReader,
    lookup: FallbackLookup,
    *,
    keep_going: bool = False,
) -> list[ClassDocumentation]:
    """Extract every class in *targets*.

    A failure while processing one class aborts the run, unless
    *keep_going* is set, in which case the class is logged and skipped.
    """
    docs: list[ClassDocumentation] = []
    for target in targets:
        logger.debug("Extracting %s", target)
        try:
            docs.append(ClassDocExtractor(target, source, reader, lookup).extract())
        except Exception as e:
            if not keep_going:
                raise
            logger.warning("Skipping %s: %s: %s", target, e.__class__.__name__, e)
    return docs


def run(
    targets: list[str],
    *,
    output: Path | None = None,
    project_dir: Path = Path("."),
    config: ClassdocConfig | None = None,
    table: Path | None = None,
) -> str:
    """Run the full classdoc pipeline and return the JSON document."""
    if config is None:
        config = load_config(project_dir)
    logger.debug("Config: %s", config)

    source, reader, lookup = build_collaborators(config, table)
    docs = extract_all(targets, source, reader, lookup, keep_going=config.keep_going)
    text = documentation_to_json(docs)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n")
        logger.info("Generated %s", output)

    return text
