"""Read classdoc settings from .classdoc.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from classdoc.lookup import DEFAULT_LINK_TEMPLATE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassdocConfig:
    """Settings for a classdoc run."""

    style: str = "epydoc"  # docstring_parser style of the docblocks
    link_template: str = DEFAULT_LINK_TEMPLATE
    keep_going: bool = False  # skip classes that fail instead of aborting

    def updated(self, **overrides) -> ClassdocConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _from_table(table: dict) -> ClassdocConfig:
    known = {f.name for f in fields(ClassdocConfig)}
    values = {}
    for key, value in table.items():
        name = key.replace("-", "_")
        if name in known:
            values[name] = value
        else:
            logger.warning("Ignoring unknown classdoc setting %r", key)
    return ClassdocConfig(**values)


def _read_table(project_dir: Path) -> dict | None:
    # Try .classdoc.toml first
    classdoc_toml = project_dir / ".classdoc.toml"
    if classdoc_toml.exists():
        try:
            with open(classdoc_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("classdoc", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", classdoc_toml, e)

    # Fall back to [tool.classdoc] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("classdoc")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", pyproject, e)

    return None


def load_config(project_dir: Path) -> ClassdocConfig:
    """Return the settings found under *project_dir*, or the defaults."""
    table = _read_table(project_dir)
    if not table:
        return ClassdocConfig()
    return _from_table(table)
