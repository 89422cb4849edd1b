"""CLI helpers for converting images and Office documents."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "convert",
        help="Convert images and Word, Excel or PowerPoint files into one PDF",
    )
    parser.add_argument("inputs", nargs="+", help="Input files, in page order")
    parser.add_argument("output", help="Output PDF path")
    parser.set_defaults(tool_name="convert", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(output_path=args.output, config={"inputs": args.inputs})
