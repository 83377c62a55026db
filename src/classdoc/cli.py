"""Command-line interface for classdoc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from classdoc.config import load_config
from classdoc.docblock import STYLES
from classdoc.pipeline import run


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="classdoc",
        description="Extract class and method documentation from docblocks as JSON.",
    )
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="CLASS",
        help="Dotted class name, e.g. package.module.ClassName",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSON file path (default: print to stdout)",
    )
    parser.add_argument(
        "--table",
        type=Path,
        default=None,
        help="Read class metadata from a TOML table instead of importing classes",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path("."),
        help="Directory holding .classdoc.toml or pyproject.toml (default: .)",
    )
    parser.add_argument(
        "--style",
        choices=sorted(STYLES),
        default=None,
        help="Docblock style (default: epydoc)",
    )
    parser.add_argument(
        "--link-template",
        default=None,
        help="URL template for methods without a docblock",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Skip classes that fail instead of aborting",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("classdoc").setLevel(logging.DEBUG)

    config = load_config(args.project_dir).updated(
        style=args.style,
        link_template=args.link_template,
        keep_going=args.keep_going,
    )
    text = run(
        args.targets,
        output=args.output,
        project_dir=args.project_dir,
        config=config,
        table=args.table,
    )
    if args.output is None:
        sys.stdout.write(text + "\n")
