"""Declarative tool registry.

Each tool is declared once: name, description, parameter rows, and the
coroutine that calls the API client.  The advertised JSON schema and the
pydantic model used to validate incoming arguments are both derived from
the same parameter rows, so the catalog and the dispatcher cannot drift.

Usage::

    @tool(
        "get_message",
        "Get detailed information about a specific message by ID.",
        Param("message_id", "integer", "Message database ID", required=True),
    )
    async def get_message(client, args):
        return await client.get_message(args.message_id)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from .errors import InvalidArgumentsError, UnknownToolError

if TYPE_CHECKING:
    from .client import OsintApiClient

Handler = Callable[["OsintApiClient", Any], Awaitable[Any]]

# Whole numbers declared as "number" stay ints so they render as "10", not "10.0".
_PY_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": int | float,
    "boolean": bool,
}


@dataclass(frozen=True)
class Param:
    """One declared tool argument."""

    name: str
    type: str
    description: str
    required: bool = False
    enum: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.type not in _PY_TYPES:
            raise ValueError(f"Unsupported parameter type for {self.name}: {self.type}")
        if self.enum is not None and self.type != "string":
            raise ValueError(f"Enumerated parameter {self.name} must be a string")

    def describe(self, description: str) -> Param:
        """Copy of this param with a different description."""
        return replace(self, description=description)

    def require(self) -> Param:
        return replace(self, required=True)

    def json_schema(self) -> dict[str, Any]:
        prop: dict[str, Any] = {"type": self.type}
        if self.enum:
            prop["enum"] = list(self.enum)
        prop["description"] = self.description
        return prop

    def annotation(self) -> Any:
        base: Any = Literal[self.enum] if self.enum else _PY_TYPES[self.type]
        return base if self.required else base | None


def _model_name(tool_name: str) -> str:
    return "".join(part.capitalize() for part in tool_name.split("_")) + "Arguments"


def build_arguments_model(tool_name: str, params: tuple[Param, ...]) -> type[BaseModel]:
    """Create a frozen pydantic model that validates a tool's argument bag.

    Optional fields default to ``None`` (unset); unknown keys are ignored.
    Numbers sent for string fields (e.g. a numeric entity id) become strings.
    """
    fields: dict[str, Any] = {}
    for p in params:
        default = ... if p.required else None
        fields[p.name] = (p.annotation(), Field(default, description=p.description))
    return create_model(
        _model_name(tool_name),
        __config__=ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True),
        **fields,
    )


def _format_validation_error(exc: ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "arguments"
        messages.append(f"{loc}: {err['msg']}")
    return messages


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: catalog entry plus its dispatch binding."""

    name: str
    description: str
    params: tuple[Param, ...]
    handler: Handler
    arguments_model: type[BaseModel] = field(repr=False, compare=False)

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }

    def definition(self) -> dict[str, Any]:
        """Catalog entry in the shape ``mcp.types.Tool`` accepts."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

    def parse(self, arguments: dict[str, Any] | None) -> BaseModel:
        """Validate *arguments* into this tool's immutable argument model."""
        try:
            return self.arguments_model.model_validate(arguments or {})
        except ValidationError as exc:
            raise InvalidArgumentsError(self.name, _format_validation_error(exc)) from exc


class ToolRegistry:
    """Name-keyed table of :class:`ToolSpec` entries, in declaration order."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def tool(self, name: str, description: str, *params: Param) -> Callable[[Handler], Handler]:
        """Decorator registering *handler* as the implementation of *name*."""
        seen = [p.name for p in params]
        if len(seen) != len(set(seen)):
            raise ValueError(f"Duplicate parameter declared for tool {name}")

        def decorator(handler: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = ToolSpec(
                name=name,
                description=description,
                params=tuple(params),
                handler=handler,
                arguments_model=build_arguments_model(name, tuple(params)),
            )
            return handler

        return decorator

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[dict[str, Any]]:
        return [spec.definition() for spec in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


REGISTRY = ToolRegistry()
tool = REGISTRY.tool
