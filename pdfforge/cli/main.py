"""Command line interface for the pdfforge toolkit."""

from __future__ import annotations

import argparse
from typing import Sequence

from ..config import get_settings
from ..core.utils import get_logger
from ..exceptions import PdfForgeError
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ConversionContext
from ..tools.common.pipeline import registry
from .commands import convert, fetch_font, merge

COMMAND_MODULES = [merge, convert, fetch_font]

LOGGER = get_logger("pdfforge.cli")


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfforge", description="Merge PDFs and convert files to PDF")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (defaults to PDFFORGE_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _configure_logging(level: str) -> None:
    get_logger("pdfforge").setLevel(level)


def main(argv: Sequence[str] | None = None) -> object:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level or get_settings().log_level)

    context: ConversionContext = args.build_context(args)
    tool = registry.create(args.tool_name, context)
    try:
        result = tool.run()
    except PdfForgeError as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        parser.exit(1, f"pdfforge {args.command}: error: {exc}\n")
    return result


if __name__ == "__main__":  # pragma: no cover
    main()
