"""CLI helpers for turning images into a PDF."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import read_sources


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("images", help="Place PNG/JPEG images one per page in a PDF")
    parser.add_argument("inputs", nargs="+", help="Image files, in page order")
    parser.add_argument("output", help="Output PDF path")
    parser.set_defaults(tool_name="images_to_pdf", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(sources=read_sources(args.inputs))
