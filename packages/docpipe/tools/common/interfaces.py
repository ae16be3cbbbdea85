"""Core interfaces and context objects shared by docpipe tools."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Sequence

from ...core.config import PipelineSettings, load_settings
from ...core.exceptions import NoSourcesError
from ...core.model import OutputArtifact, SourceFile
from ...core.utils import configure_logging


@dataclass
class ConversionContext:
    """Inputs, options and shared state for one tool invocation.

    ``settings`` defaults to :func:`load_settings`, so a malformed
    ``DOCPIPE_*`` variable surfaces here as a :class:`ValueError` before
    any document is touched. ``resources`` carries injected collaborators
    such as a rendering backend, and receives the result under ``"result"``.
    """

    sources: Sequence[SourceFile] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)
    resources: dict[str, Any] = field(default_factory=dict)
    settings: PipelineSettings | None = None
    cancel: threading.Event | None = None

    def __post_init__(self) -> None:
        self.sources = list(self.sources)
        if self.settings is None:
            self.settings = load_settings()
        configure_logging(self.settings)

    def single_source(self) -> SourceFile:
        if not self.sources:
            raise NoSourcesError()
        if len(self.sources) > 1:
            raise ValueError(f"Expected exactly one input file, got {len(self.sources)}")
        return self.sources[0]


class BaseTool:
    """Base class for all pluggable docpipe tools."""

    name: str

    def __init__(self, context: ConversionContext) -> None:
        self.context = context

    def run(self) -> OutputArtifact:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    def _store(self, artifact: OutputArtifact) -> OutputArtifact:
        self.context.resources["result"] = artifact
        return artifact
