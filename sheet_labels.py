#!/usr/bin/env python3
"""Generate label sheet PDFs from a text file of records."""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from dotenv import load_dotenv

from label_errors import LabelError
from label_generation import render_file
from label_templates import TypeRegistry, default_registry, list_types


def read_records(source: str) -> List[str]:
    """Split the input into records separated by blank lines."""

    if source == "-":
        raw = sys.stdin.read()
    else:
        with open(source, "r", encoding="utf-8") as handle:
            raw = handle.read()

    records: List[str] = []
    current: List[str] = []
    for line in raw.splitlines():
        if line.strip():
            current.append(line.rstrip())
            continue
        if current:
            records.append("\n".join(current))
            current = []
    if current:
        records.append("\n".join(current))
    return records


def build_registry(types_file: Optional[str]) -> TypeRegistry:
    registry = default_registry()
    if types_file:
        registry = registry.merge_file(types_file)
    return registry


def build_options(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "type": args.type,
        "shrink_to_fit": args.shrink_to_fit,
        "vertical_text": args.vertical_text,
        "skip": args.skip,
        "draw_outline": args.draw_outline,
        "document": {"title": args.title or os.path.basename(args.output)},
    }
    if args.font_path:
        options["font_path"] = args.font_path
    if args.font_size is not None:
        options["font_size"] = args.font_size
    if args.min_font_size is not None:
        options["min_font_size"] = args.min_font_size
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for generating a label sheet PDF."""

    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Text records -> label sheet PDF"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Text file with records separated by blank lines ('-' for stdin).",
    )
    parser.add_argument("-o", "--output", default="labels.pdf")
    parser.add_argument(
        "-t", "--type",
        default=os.getenv("SHEET_LABELS_TYPE", "Avery5160"),
        help=(
            "Label type name (defaults to SHEET_LABELS_TYPE from the "
            "environment/.env, else Avery5160)."
        ),
    )
    parser.add_argument(
        "--types-file",
        default=os.getenv("SHEET_LABELS_TYPES_FILE"),
        help="YAML file with additional label types.",
    )
    parser.add_argument(
        "--font-path",
        default=os.getenv("SHEET_LABELS_FONT"),
        help="TrueType/OpenType font file or registered font name.",
    )
    parser.add_argument("--font-size", type=float, help="Starting font size in points.")
    parser.add_argument(
        "--min-font-size",
        type=float,
        help="Smallest font size the fitter may shrink to (default: 4).",
    )
    parser.add_argument(
        "--shrink-to-fit",
        action="store_true",
        help="Estimate the font size from the record's line count.",
    )
    parser.add_argument(
        "--vertical-text",
        action="store_true",
        help="Rotate every label for sideways label stock.",
    )
    parser.add_argument(
        "-s", "--skip",
        type=int,
        default=0,
        help="Number of labels to skip at start of first sheet",
    )
    parser.add_argument(
        "-d", "--draw-outline",
        action="store_true",
        help="Draw outline around every label",
    )
    parser.add_argument("--title", help="PDF document title.")
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="Print the available label types and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = build_registry(args.types_file)
        if args.list_types:
            for name in list_types(registry):
                print(name)
            return 0

        if not args.input:
            parser.error("an input file is required")

        records = read_records(args.input)
        if not records:
            print("No records found in input; no output generated.")
            return 0

        output = render_file(
            args.output,
            records,
            build_options(args),
            registry=registry,
        )
    except LabelError as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    main()
