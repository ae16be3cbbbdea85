"""CLI helpers for merging PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import read_sources


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Merge multiple PDFs into one")
    parser.add_argument("inputs", nargs="+", help="Input PDF files, in merge order")
    parser.add_argument("output", help="Output PDF path")
    parser.set_defaults(tool_name="merge", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(sources=read_sources(args.inputs))
