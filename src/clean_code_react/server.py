"""
Clean Code React MCP Server - React/TypeScript patterns and code quality guidance

Features:
- TOOLS: pattern overview, pattern details, code quality fundamentals
  (plus one tool per pattern when per_pattern_tools is enabled)
- RESOURCES: every pattern and the fundamentals document as JSON
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Annotated, Callable

from pydantic import Field, StrictStr

from .config import Settings, get_settings
from .mcp_core import Json, McpServer, _Tool, serve_stdio
from .models import IdentifiedPattern, QualityFundamentals
from .quality import get_quality_fundamentals
from .registry import PatternRegistry, build_registry
from .result import Result
from .version import get_version

logger = logging.getLogger("clean_code_react.server")

USAGE = {
    "nextStep": (
        "Choose a pattern that fits your needs and call get_pattern with its id "
        "for detailed guidance and examples"
    ),
    "example": (
        "Call 'get_pattern' with {\"patternId\": \"container-presentational\"} "
        "for detailed Container/Presentational pattern implementation"
    ),
}


def pattern_tool_name(pattern_id: str) -> str:
    """'builder-pattern' -> 'get_builder_pattern', 'render-props' -> 'get_render_props_pattern'."""
    stem = pattern_id.removesuffix("-pattern").replace("-", "_")
    return f"get_{stem}_pattern"


class CleanCodeReactService(McpServer):

    def __init__(self, registry: PatternRegistry | None = None,
                 fundamentals: QualityFundamentals | None = None,
                 settings: Settings | None = None):
        settings = settings or Settings()
        super().__init__(name=settings.server_name, version=get_version())
        self._registry = registry if registry is not None else build_registry()
        self._fundamentals = fundamentals if fundamentals is not None else get_quality_fundamentals()
        if settings.per_pattern_tools:
            self._register_pattern_tools()

    # ===== TOOLS =====

    def get_patterns(self) -> dict:
        """Get an overview of all available React patterns and best practices.
        Use this first to discover which patterns you need, then call
        get_pattern for detailed guidance.
        """
        return {
            "patterns": [
                {"id": pattern_id, **overview.to_wire()}
                for pattern_id, overview in self._registry.list_overviews()
            ],
            "usage": USAGE,
        }

    def get_pattern(
        self,
        pattern_id: Annotated[StrictStr, Field(alias="patternId", description="The ID of the pattern to retrieve")],
    ) -> Result[dict[str, IdentifiedPattern], Exception]:
        """Get detailed information about a specific React pattern with
        comprehensive examples and implementation guidance.
        """
        return self._registry.get_detailed(pattern_id).map(lambda pattern: {"pattern": pattern})

    def get_code_quality_fundamentals(self) -> QualityFundamentals:
        """Get comprehensive code quality fundamentals based on the four
        principles: Readability, Predictability, Cohesion, and Coupling. These
        principles help you write maintainable React/TypeScript code.
        """
        return self._fundamentals

    # ===== RESOURCES =====

    def resource_pattern(self, pattern_id: str) -> Result[IdentifiedPattern, Exception]:
        """Detailed pattern document by id."""
        return self._registry.get_detailed(pattern_id)

    def resource_quality_fundamentals(self) -> QualityFundamentals:
        """The four principles of writing good code."""
        return self._fundamentals

    # ===== helpers =====

    def _describe_tool(self, tool: _Tool) -> Json:
        descriptor = super()._describe_tool(tool)
        if tool.name == "get_pattern":
            descriptor["inputSchema"]["properties"]["patternId"]["enum"] = list(self._registry.list_ids())
        return descriptor

    def _register_pattern_tools(self) -> None:
        for pattern_id, overview in self._registry.list_overviews():
            self.register_tool(
                pattern_tool_name(pattern_id),
                self._pattern_tool(pattern_id),
                description=f"Get detailed information about the {overview.name}. {overview.description}",
            )

    def _pattern_tool(self, pattern_id: str) -> Callable[[], Result]:
        def handler():
            return self.get_pattern(pattern_id)
        return handler


def boot() -> int:
    """Run the server on stdin/stdout until EOF or Ctrl-C."""
    try:
        settings = get_settings()
        logging.basicConfig(stream=sys.stderr, level=settings.log_level, format=settings.log_format)
        svc = CleanCodeReactService(settings=settings)
    except Exception:
        logging.basicConfig(stream=sys.stderr)
        logger.exception("Server error")
        return 1

    try:
        asyncio.run(serve_stdio(svc))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(boot())
