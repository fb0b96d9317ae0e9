"""CLI entry point for receipt parsing."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

from .classifier import should_ignore
from .config import load_config
from .heuristic import derive_item
from .pipeline import ReceiptParser


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pantry-receipts",
        description="Turn OCR'd receipt text into pantry items",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the config file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse receipt lines into items")
    parse_parser.add_argument(
        "file", nargs="?", default=None, help="Text file with one OCR line per line (default: stdin)"
    )
    parse_parser.add_argument("--json", action="store_true", help="Output JSON")
    parse_parser.add_argument(
        "--heuristic-only", action="store_true",
        help="Skip model extraction even if an API key is configured",
    )

    # inspect
    inspect_parser = sub.add_parser(
        "inspect", help="Show how the heuristic parser reads each line"
    )
    inspect_parser.add_argument(
        "file", nargs="?", default=None, help="Text file with one OCR line per line (default: stdin)"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = _read_lines(args.file)
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    match args.command:
        case "parse":
            asyncio.run(_cmd_parse(config, args, lines))
        case "inspect":
            _cmd_inspect(lines)


def _read_lines(path: str | None) -> list[str]:
    if path is None or path == "-":
        return sys.stdin.read().splitlines()
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


async def _cmd_parse(config, args, lines: list[str]) -> None:
    if args.heuristic_only:
        receipt_parser = ReceiptParser()
    else:
        receipt_parser = ReceiptParser.from_config(config)

    outcome = await receipt_parser.parse_with_source(lines)

    if args.json:
        data = {
            "source": outcome.source,
            "items": [item.to_dict() for item in outcome.items],
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not outcome.items:
        print("No items detected.")
        return
    print(f"{len(outcome.items)} items ({outcome.source}):")
    for item in outcome.items:
        print(f"  {item.name:<30} {item.quantity:>6} {item.unit}")


def _cmd_inspect(lines: list[str]) -> None:
    for line in lines:
        if should_ignore(line):
            print(f"  ignored  | {line}")
            continue
        item = derive_item(line)
        if item is None:
            print(f"  dropped  | {line}")
        else:
            print(f"  item     | {line}  →  {item.name} / {item.quantity} {item.unit}")
