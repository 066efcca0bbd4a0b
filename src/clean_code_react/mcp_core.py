from __future__ import annotations

import asyncio
import inspect
import json
import logging
import re
import sys
import types
from typing import Any, Callable, get_type_hints

from pydantic import BaseModel, ConfigDict, ValidationError, create_model
from pydantic_core import to_jsonable_python

from .errors import (
    InvalidArgumentError,
    NotFoundError,
    PatternServerError,
    UnexpectedError,
    UnknownToolError,
)
from .result import Err, Ok, Result

Json = dict[str, Any]

logger = logging.getLogger("clean_code_react.mcp")

LATEST_PROTOCOL_VERSION = "2025-06-18"
SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")

# JSON-RPC / MCP error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
NOT_INITIALIZED = -32002
RESOURCE_NOT_FOUND = -32002

# Tool arguments are never coerced: "42" is not 42 and 42 is not "42"
_ARGS_CONFIG = ConfigDict(strict=True, extra="ignore")


def _build_param_model(fn: Callable) -> type[BaseModel] | None:
    sig = inspect.signature(fn)
    hints = get_type_hints(fn, include_extras=True)
    fields = {}
    for name, p in sig.parameters.items():
        if name == "self":
            continue
        ann = hints.get(name, Any)
        fields[name] = (ann, ...) if p.default is inspect.Parameter.empty else (
            ann, p.default)
    # type: ignore
    return create_model(f"{fn.__name__}Params", __config__=_ARGS_CONFIG, **fields) if fields else None


def _doc_summary(fn: Callable) -> str | None:
    """First paragraph of the docstring, joined into one line."""
    doc = inspect.getdoc(fn) or ""
    paragraph = doc.strip().split("\n\n")[0]
    return " ".join(line.strip() for line in paragraph.splitlines()) or None


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "arguments"
        if err["type"] == "missing":
            problems.append(f"{field} is required")
        else:
            problems.append(f"{field}: {err['msg']}")
    return "Invalid arguments: " + "; ".join(problems)


def _to_text(payload: Any) -> str:
    return json.dumps(to_jsonable_python(payload, by_alias=True), indent=2, ensure_ascii=False)


class _Tool:
    def __init__(self, name: str, fn: Callable, description: str | None = None):
        self.name = name
        self.fn = fn
        self.params_model = _build_param_model(fn)
        self.description = description or _doc_summary(fn)

    def bind(self, instance: object) -> _Tool:
        bound = object.__new__(_Tool)
        bound.__dict__.update(self.__dict__)
        bound.fn = types.MethodType(self.fn, instance)
        return bound

    def input_schema(self) -> Json:
        if not self.params_model:
            return {"type": "object", "properties": {}}
        schema = self.params_model.model_json_schema()
        schema.pop("title", None)
        return schema

    def parse_arguments(self, arguments: Any) -> Result[Json, InvalidArgumentError]:
        if self.params_model is None:
            return Ok({})
        if not isinstance(arguments, dict):
            return Err(InvalidArgumentError("Invalid arguments: expected an object"))
        try:
            parsed = self.params_model.model_validate(arguments)
        except ValidationError as e:
            return Err(InvalidArgumentError(_describe_validation_error(e)))
        return Ok(dict(parsed))


class _Resource:
    def __init__(self, uri: str, name: str, description: str, mimeType: str, fn: Callable):
        self.uri = uri
        self.name = name
        self.description = description
        self.mimeType = mimeType
        self.fn = fn
        self.uri_params = re.findall(r'\{(\w+)\}', uri)

    @property
    def is_template(self) -> bool:
        return bool(self.uri_params)

    def matches_uri(self, uri: str) -> dict[str, str] | None:
        '''Check if URI matches this resource template and extract params.'''
        pattern = re.escape(self.uri).replace(r'\{', '{').replace(r'\}', '}')
        pattern = re.sub(r'\{(\w+)\}', r'(?P<\1>[^/]+)', pattern)
        match = re.match(f'^{pattern}$', uri)
        return match.groupdict() if match else None


class McpMeta(type):
    def __new__(mcls, name, bases, ns, **kw):
        cls = super().__new__(mcls, name, bases, ns, **kw)
        tools: dict[str, _Tool] = {}
        resources: dict[str, _Resource] = {}

        # Only subclasses of the runtime contribute tools, never McpServer itself
        parents = [b for b in bases if isinstance(b, McpMeta)]
        if not parents:
            setattr(cls, "__mcp_tools__", tools)
            setattr(cls, "__mcp_resources__", resources)
            return cls

        for parent in parents:
            tools.update(parent.__mcp_tools__)
            resources.update(parent.__mcp_resources__)

        for attr, val in ns.items():
            if not callable(val) or attr.startswith("_"):
                continue

            # Convention: resource_* methods become resources
            if attr.startswith("resource_"):
                resource_name = attr[9:]
                params = [p for p in inspect.signature(val).parameters if p != 'self']
                if params:
                    uri = f"res://{resource_name}/{{{params[0]}}}"
                else:
                    uri = f"res://{resource_name}"

                resources[uri] = _Resource(
                    uri=uri,
                    name=resource_name.replace('_', ' ').title(),
                    description=_doc_summary(val) or "",
                    mimeType="application/json",
                    fn=val,
                )

            # Default: plain method is a tool
            else:
                tools[attr] = _Tool(attr, val)

        setattr(cls, "__mcp_tools__", tools)
        setattr(cls, "__mcp_resources__", resources)
        return cls


class McpServer(metaclass=McpMeta):
    """Base class for MCP services.

    Public methods become tools and ``resource_*`` methods become resources.
    ``call_tool`` is the dispatch boundary: it always returns a well-formed
    tool result, turning every failure into an error payload.
    """

    def __init__(self, name: str | None = None, version: str = "0.1.0"):
        self._initialized = False
        self._protocol_version = LATEST_PROTOCOL_VERSION
        self._name = name or self.__class__.__name__
        self._version = version
        self._tools: dict[str, _Tool] = {
            tool_name: tool.bind(self) for tool_name, tool in self.__mcp_tools__.items()
        }

    def register_tool(self, name: str, fn: Callable, description: str | None = None) -> None:
        """Add a tool to this instance only. ``fn`` must already be bound."""
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = _Tool(name, fn, description)

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def close(self) -> None:
        self._initialized = False
        logger.info("%s closed", self._name)

    def _server_info(self) -> Json:
        return {"name": self._name, "version": self._version}

    def _capabilities(self) -> Json:
        caps: Json = {}
        if self._tools:
            caps["tools"] = {"listChanged": False}
        if self.__mcp_resources__:
            caps["resources"] = {"subscribe": False, "listChanged": False}
        return caps

    def _describe_tool(self, tool: _Tool) -> Json:
        return {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema(),
        }

    def _tools_list(self) -> list[Json]:
        return [self._describe_tool(t) for t in self._tools.values()]

    def _resources_list(self) -> list[Json]:
        return [{
            "uri": r.uri,
            "name": r.name,
            "description": r.description,
            "mimeType": r.mimeType
        } for r in self.__mcp_resources__.values() if not r.is_template]

    def _resource_templates_list(self) -> list[Json]:
        return [{
            "uriTemplate": r.uri,
            "name": r.name,
            "description": r.description,
            "mimeType": r.mimeType
        } for r in self.__mcp_resources__.values() if r.is_template]

    # ============ DISPATCH ============

    async def _dispatch(self, name: Any, arguments: Any) -> Result[Any, Any]:
        tool = self._tools.get(name) if isinstance(name, str) else None
        if tool is None:
            return Err(UnknownToolError(name))

        parsed = tool.parse_arguments(arguments)
        if parsed.is_err():
            return parsed

        try:
            res = tool.fn(**parsed.unwrap())
            if inspect.isawaitable(res):
                res = await res
        except Exception:
            logger.exception("Tool '%s' raised", name)
            return Err(UnexpectedError(f"Unexpected error while running tool '{name}'"))

        return res if isinstance(res, Result) else Ok(res)

    async def call_tool(self, name: Any, arguments: Any = None) -> Json:
        """Run one tool and wrap the outcome in an MCP tool result."""
        logger.debug("tools/call %s", name)
        result = await self._dispatch(name, {} if arguments is None else arguments)

        if result.is_ok():
            try:
                text = _to_text(result.unwrap())
            except (TypeError, ValueError):
                logger.exception("Could not serialize result of '%s'", name)
                result = Err(UnexpectedError(f"Tool '{name}' returned an unserializable result"))
            else:
                return {"content": [{"type": "text", "text": text}]}

        error = result.unwrap_err()
        message = error.message if isinstance(error, PatternServerError) else str(error)
        logger.info("Tool '%s' failed: %s", name, message)
        return {
            "content": [{"type": "text", "text": _to_text({"error": message})}],
            "isError": True,
        }

    async def read_resource(self, uri: str) -> Result[Json, PatternServerError]:
        for resource in self.__mcp_resources__.values():
            params = resource.matches_uri(uri)
            if params is None:
                continue
            content = resource.fn(self, **params)
            if inspect.isawaitable(content):
                content = await content
            if isinstance(content, Result):
                if content.is_err():
                    return content
                content = content.unwrap()
            return Ok({
                "contents": [{
                    "uri": uri,
                    "mimeType": resource.mimeType,
                    "text": _to_text(content),
                }]
            })
        return Err(NotFoundError(uri, what="Resource"))

    # ============ JSON-RPC ============

    async def handle_message(self, raw: str | bytes) -> Json | None:
        """Decode one JSON-RPC message and produce its response, if any."""
        try:
            req = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error(None, PARSE_ERROR, "Parse error")
        if not isinstance(req, dict):
            return _error(None, INVALID_REQUEST, "Invalid JSON-RPC")
        return await self._handle_request(req)

    async def _handle_request(self, req: Json) -> Json | None:
        if req.get("jsonrpc") != "2.0":
            return _error(req.get("id"), INVALID_REQUEST, "Invalid JSON-RPC")

        method = req.get("method")
        req_id = req.get("id")
        params = req.get("params") or {}
        if not isinstance(params, dict):
            return _error(req_id, INVALID_PARAMS, "params must be an object")

        # MCP LIFECYCLE: initialize
        if method == "initialize":
            client_version = params.get("protocolVersion")
            if client_version in SUPPORTED_PROTOCOL_VERSIONS:
                self._protocol_version = client_version
            else:
                logger.info("Client asked for protocol %r, offering %s",
                            client_version, LATEST_PROTOCOL_VERSION)
                self._protocol_version = LATEST_PROTOCOL_VERSION

            return _result(req_id, {
                "protocolVersion": self._protocol_version,
                "capabilities": self._capabilities(),
                "serverInfo": self._server_info()
            })

        # Notifications never get responses
        if isinstance(method, str) and method.startswith("notifications/"):
            if method == "notifications/initialized":
                self._initialized = True
            return None

        # A message without an id is a notification too, whatever its method
        if "id" not in req:
            logger.debug("Ignoring notification %r", method)
            return None

        if method == "ping":
            return _result(req_id, {})

        # ENFORCE INITIALIZATION
        if not self._initialized:
            return _error(req_id, NOT_INITIALIZED, "Server not initialized")

        if method == "tools/list":
            return _result(req_id, {"tools": self._tools_list()})

        if method == "tools/call":
            result = await self.call_tool(params.get("name"), params.get("arguments"))
            return _result(req_id, result)

        if method == "resources/list":
            return _result(req_id, {"resources": self._resources_list()})

        if method == "resources/templates/list":
            return _result(req_id, {"resourceTemplates": self._resource_templates_list()})

        if method == "resources/read":
            uri = params.get("uri")
            if not isinstance(uri, str) or not uri:
                return _error(req_id, INVALID_PARAMS, "Missing uri parameter")
            try:
                read = await self.read_resource(uri)
            except Exception as e:
                logger.exception("Reading resource %s failed", uri)
                return _error(req_id, INTERNAL_ERROR, str(e))
            if read.is_err():
                err = read.unwrap_err()
                code = RESOURCE_NOT_FOUND if isinstance(err, NotFoundError) else INTERNAL_ERROR
                return _error(req_id, code, err.message)
            return _result(req_id, read.unwrap())

        return _error(req_id, METHOD_NOT_FOUND, f"Unknown method: {method}")


def _result(req_id: Any, result: Json) -> Json:
    return {"jsonrpc": "2.0", "id": req_id, "result": result}


def _error(req_id: Any, code: int, message: str) -> Json:
    return {"jsonrpc": "2.0", "id": req_id, "error": {"code": code, "message": message}}


# ============ STDIO TRANSPORT ============

async def serve_stream(server: McpServer, reader: asyncio.StreamReader,
                       write: Callable[[str], None]) -> None:
    """Answer newline-delimited JSON-RPC messages until the reader hits EOF.

    Frames are written ASCII-only (non-ASCII escaped) so they survive any
    stdout encoding.
    """
    while True:
        try:
            line = await reader.readline()
        except ValueError:
            # readline() already dropped the oversized line from the buffer
            logger.warning("Dropped a message over the stream limit")
            write(json.dumps(_error(None, INVALID_REQUEST, "Message too large")) + "\n")
            continue
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        resp = await server.handle_message(line)
        # Only write if there's a response (notifications return None)
        if resp is not None:
            write(json.dumps(resp) + "\n")


async def serve_stdio(server: McpServer) -> None:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=2 ** 22)
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)

    def write(data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()

    logger.info("Serving MCP over stdio")
    try:
        await serve_stream(server, reader, write)
    finally:
        server.close()
