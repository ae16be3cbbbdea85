"""Registry of the document operations available to the CLI, HTTP app and API."""

from __future__ import annotations

from typing import Dict, Iterable

from ...core.model import OutputArtifact
from ...core.utils import get_logger
from .interfaces import BaseTool, ConversionContext

LOGGER = get_logger("docpipe.tools.pipeline")


class ToolRegistry:
    """Maps operation names such as ``"merge"`` to their tool classes."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if not issubclass(tool_class, BaseTool):
            raise TypeError(f"{tool_class.__name__} is not a BaseTool")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        tool_class.name = name
        self._tools[name] = tool_class

    def create(self, name: str, context: ConversionContext) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            available = ", ".join(self.names()) or "none"
            raise KeyError(f"Tool '{name}' is not registered (available: {available})") from exc
        return tool_class(context)

    def run(self, name: str, context: ConversionContext) -> OutputArtifact:
        """Run the tool registered as ``name`` and return its artifact."""

        tool = self.create(name, context)
        LOGGER.debug("Running %s on %d input(s)", name, len(context.sources))
        artifact = tool.run()
        LOGGER.debug("%s produced %s (%d bytes)", name, artifact.filename, artifact.size)
        return artifact

    def names(self) -> Iterable[str]:
        return sorted(self._tools.keys())


registry = ToolRegistry()


def register_tool(name: str):
    """Class decorator registering a :class:`BaseTool` under ``name``."""

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool"]
