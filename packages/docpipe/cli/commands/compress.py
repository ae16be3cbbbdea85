"""CLI helpers for compressing PDF files."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from . import read_sources


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("compress", help="Resave a PDF to reduce its size")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Destination for the optimized PDF")
    parser.set_defaults(tool_name="compress", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    return ConversionContext(sources=read_sources([args.input]))
