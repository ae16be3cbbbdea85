"""Command line interface for the docpipe toolkit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..core.exceptions import DocPipeError
from ..core.utils import get_logger
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ConversionContext
from ..tools.common.pipeline import registry
from .commands import compress, images, merge, rasterize, split

COMMAND_MODULES = [merge, split, compress, images, rasterize]

LOGGER = get_logger("docpipe.cli")


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docpipe", description="Local PDF and image transforms")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        context: ConversionContext = args.build_context(args)
    except (OSError, ValueError) as exc:
        # Unreadable input paths or malformed DOCPIPE_* settings.
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        artifact = registry.run(args.tool_name, context)
    except DocPipeError as exc:
        print(f"error [{exc.kind}]: {exc.message}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    destination = Path(args.output).expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(artifact.data)
    LOGGER.info("Wrote %s (%d bytes) to %s", artifact.filename, artifact.size, destination)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
