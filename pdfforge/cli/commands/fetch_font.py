"""CLI helpers for downloading the text font."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("fetch-font", help="Download the font used for text pages")
    parser.add_argument(
        "--output",
        help="Where to store the font (defaults to PDFFORGE_FONT_PATH)",
    )
    parser.add_argument("--force", action="store_true", help="Download even if the file exists")
    parser.set_defaults(tool_name="fetch-font", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(output_path=args.output, config={"force": args.force})
