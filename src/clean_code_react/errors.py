"""
Error kinds reported back to MCP clients.

These are carried as values inside ``Result`` objects. Nothing in the
request path raises them; ``McpServer.call_tool`` turns whichever one it
receives into an ``{"error": message}`` payload with ``isError`` set.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_TOOL = "unknown_tool"
    UNEXPECTED = "unexpected"


class PatternServerError(Exception):
    """Base class for every error a tool call can end in."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternServerError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NotFoundError(PatternServerError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str, what: str = "Pattern"):
        super().__init__(f"{what} '{key}' not found in registry")
        self.key = key


class InvalidArgumentError(PatternServerError):
    kind = ErrorKind.INVALID_ARGUMENT


class UnknownToolError(PatternServerError):
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, name: object):
        super().__init__(f"Tool '{name}' not found")
        self.name = name


class UnexpectedError(PatternServerError):
    kind = ErrorKind.UNEXPECTED


class RegistryIntegrityError(ValueError):
    """Raised while building a registry whose content is inconsistent."""
