"""
Command-line entry point.

Usage:
    eju-build                          # ./data → ./dist/eju-math.jsx
    eju-build --data ./my-data         # custom data directory
    eju-build --out ./output.jsx       # custom output file
    eju-build --template ./tpl.jsx     # custom template
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from eju_toolkit.builder import BuildError, BuilderConfig, build_document
from eju_toolkit.builder.summary import format_summary

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eju-build",
        description="Merge exam fragment JSON files and inject them into the viewer template",
    )
    parser.add_argument("--data", help="Fragment data directory (default: ./data)")
    parser.add_argument("--out", help="Output document path (default: ./dist/eju-math.jsx)")
    parser.add_argument(
        "--template", help="Template file path (default: ./template/app-template.jsx)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = BuilderConfig.from_args(data=args.data, out=args.out, template=args.template)
    try:
        result = build_document(config)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    for line in format_summary(result):
        logger.info(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
