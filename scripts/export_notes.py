"""Export the rule notes glossary as JSON or Markdown.

Usage:
  python scripts/export_notes.py --format markdown --output data/rule_notes.md
  python scripts/export_notes.py            # JSON to stdout

This script does not require Streamlit.
"""
import argparse
import logging
import sys
from pathlib import Path

from core.note_export import dumps_json, to_markdown
from core.notes import iter_notes


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--format", choices=("json", "markdown"), default="json")
    parser.add_argument("--output", type=Path, default=None)
    parser.add_argument("--include-placeholders", action="store_true")
    return parser


def render(fmt, include_placeholders):
    notes = list(iter_notes(include_placeholders=include_placeholders))
    if fmt == "markdown":
        return to_markdown(notes, include_placeholders=include_placeholders)
    return dumps_json(notes)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="[dicesim] %(message)s")
    args = build_parser().parse_args(argv)

    text = render(args.format, args.include_placeholders)

    if args.output is None:
        print(text)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text, encoding="utf-8")
    logging.getLogger(__name__).info("Wrote %s glossary to %s", args.format, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
