"""CLI helpers for the split command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import read_sources


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("split", help="Extract selected pages into a new PDF")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument(
        "--ranges",
        required=True,
        help="Comma separated pages and ranges, e.g. '1, 3-5, 8'",
    )
    parser.set_defaults(tool_name="split", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(
        sources=read_sources([args.input]),
        config={"ranges": args.ranges},
    )
