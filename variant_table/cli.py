"""Command-line entry point: organize a saved document into an SVG variants table."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from variant_table.canvas.memory import MemoryCanvas
from variant_table.canvas.svg import render_svg
from variant_table.commands import CommandHandler, Host
from variant_table.config import settings
from variant_table.document import Document
from variant_table.errors import DocumentError
from variant_table.models.messages import CreateDarkModeMessage, OrganizeVariantsMessage
from variant_table.variables.store import MemoryVariableStore

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.variant_table_log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variant-table",
        description="Lay out component variants as a comparison table",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    org = sub.add_parser("organize", help="Build a variants table from a document JSON file")
    org.add_argument("document", type=Path, help="Document JSON (nodes + selection)")
    org.add_argument("--select", nargs="+", metavar="NODE_ID", help="Override the saved selection")
    org.add_argument("-o", "--output", type=Path, help="Write the table as SVG")
    org.add_argument("--dark", action="store_true", help="Also create the dark-mode duplicate")
    org.add_argument("--variables", type=Path, help="Variables JSON for dark-mode colors")
    org.add_argument("--collection", help=f"Variable collection (default {settings.default_collection_name})")
    org.add_argument("--light-mode", help=f"Light mode name (default {settings.default_light_mode_name})")
    org.add_argument("--dark-mode", help=f"Dark mode name (default {settings.default_dark_mode_name})")
    org.add_argument("--dark-output", type=Path, help="Write the dark-mode table as SVG")
    return parser


def _organize(args: argparse.Namespace) -> int:
    document = Document.load(args.document)
    if args.select:
        document.select(*args.select)
    variables = MemoryVariableStore.load(args.variables) if args.variables else MemoryVariableStore()

    host = Host(document=document, canvas=MemoryCanvas(), variables=variables, on_notice=print)
    handler = CommandHandler(host)

    handler.handle(OrganizeVariantsMessage())
    if handler.last_table is None:
        return 1
    if args.output:
        root = handler.last_table.root
        args.output.write_text(render_svg(root, title=root.name), encoding="utf-8")
        logger.info("Wrote %s", args.output)

    if args.dark:
        handler.handle(CreateDarkModeMessage(
            collection_name=args.collection,
            light_mode_name=args.light_mode,
            dark_mode_name=args.dark_mode,
        ))
        if handler.last_dark is None or handler.last_dark.root is None:
            return 1
        if args.dark_output:
            root = handler.last_dark.root
            args.dark_output.write_text(render_svg(root, title=root.name), encoding="utf-8")
            logger.info("Wrote %s", args.dark_output)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "organize":
            return _organize(args)
    except DocumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
