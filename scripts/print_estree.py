#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from estree_cst import PrintError, PrinterOptions, print_estree
from estree_cst.cst import GreenNode, GreenToken


def format_cst(root: GreenNode) -> str:
    lines: list[str] = []

    def walk(element: GreenNode | GreenToken, depth: int) -> None:
        indent = "  " * depth
        if isinstance(element, GreenToken):
            lines.append(f"{indent}{element.kind.name} {element.text!r}")
            return
        lines.append(f"{indent}{element.kind}")
        for child in element.children:
            walk(child, depth + 1)

    walk(root, 0)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print an ESTree JSON document as formatted source.")
    parser.add_argument("input", type=Path, help="JSON file holding a Program node or a list of statements.")
    parser.add_argument("--out", type=Path, default=None, help="Write output here instead of stdout.")
    parser.add_argument("--cst", action="store_true", help="Dump the concrete syntax tree instead of text.")
    parser.add_argument("--indent", default="\t", help="Indentation unit (defaults to one tab).")
    parser.add_argument(
        "--max-inline-width",
        type=int,
        default=50,
        help="Measured width above which lists break over several lines.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        node = json.loads(args.input.read_text(encoding="utf-8"))
        options = PrinterOptions(indent=args.indent, max_inline_width=args.max_inline_width)
        result = print_estree(node, options)
    except (OSError, ValueError, PrintError) as exc:
        print(f"Failed to print {args.input}: {exc}", file=sys.stderr)
        return 1

    output = format_cst(result.green_root) if args.cst else result.text

    if args.out is None:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
        return 0

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(output, encoding="utf-8")
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
