"""
Clean Code React - an MCP server with React/TypeScript design patterns and
code quality fundamentals.
"""

from .errors import (
    InvalidArgumentError,
    NotFoundError,
    PatternServerError,
    RegistryIntegrityError,
    UnexpectedError,
    UnknownToolError,
)
from .quality import get_quality_fundamentals
from .registry import PatternRegistry, build_registry
from .result import Err, Ok, Result
from .server import CleanCodeReactService, boot

__all__ = [
    'CleanCodeReactService', 'boot',
    'PatternRegistry', 'build_registry', 'get_quality_fundamentals',
    'Result', 'Ok', 'Err',
    'PatternServerError', 'NotFoundError', 'InvalidArgumentError',
    'UnknownToolError', 'UnexpectedError', 'RegistryIntegrityError',
]
