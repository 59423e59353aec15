#!/usr/bin/env python3
"""Format references from a JSON or YAML file.

The file holds one reference object or a list of them. Unknown keys are
kept in the reference's additional_info and do not affect the output.

Usage:
  python scripts/format_reference.py refs.yaml --style Vancouver
  python scripts/format_reference.py refs.json --style APA --format TEXT
  python scripts/format_reference.py refs.yaml --style IEEE --export-dir out/
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import yaml

from citeformat.core.reference import OutputFormat, Reference, ReferenceStyle
from citeformat.core.settings import get_settings
from citeformat.exporters import export_all
from citeformat.render import format_bibliography

logger = logging.getLogger("format_reference")


def load_references(path: str | Path) -> list[Reference]:
    """Load one reference or a list of references from JSON or YAML."""
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text)
    if isinstance(raw, dict):
        raw = [raw]
    return [Reference.model_validate(item) for item in raw]


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Format references in a citation style")
    parser.add_argument("path", help="JSON or YAML file with one reference or a list")
    parser.add_argument(
        "--style",
        required=True,
        type=ReferenceStyle.parse,
        help="Citation style, any case: " + ", ".join(s.value for s in ReferenceStyle),
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default=settings.rendering.default_output_format.value,
        choices=[f.value for f in OutputFormat],
    )
    parser.add_argument("--export-dir", help="Also write DOCX/Markdown/HTML bibliographies here")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    references = load_references(args.path)
    logger.info("Loaded %d references from %s", len(references), args.path)

    for line in format_bibliography(references, args.style, args.output_format):
        print(line)

    if args.export_dir:
        paths = export_all(references, args.style, args.export_dir)
        for name, path in paths.items():
            logger.info("  %s: %s", name, path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
