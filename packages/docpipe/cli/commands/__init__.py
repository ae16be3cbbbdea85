"""Sub-command definitions for the docpipe CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ...core.model import SourceFile


def read_sources(paths: Iterable[str]) -> list[SourceFile]:
    return [SourceFile.from_path(Path(path).expanduser()) for path in paths]
