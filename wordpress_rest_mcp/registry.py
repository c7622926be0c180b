"""Tool catalog, category selection and the uniform result envelope.

Every tool is a :class:`ToolDescriptor` (name, description, pydantic input
model) paired by name with an async handler. Handlers are wrapped once, at
registration time, by :func:`wrap_handler`, so an invocation always ends in a
:class:`ToolOutcome` whatever the handler does.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

import mcp.types as types
from pydantic import BaseModel, ValidationError

from .config import logger
from .errors import NotFoundError, TransportError, UnknownToolError
from .utils import describe_error, to_json

# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolOutcome(BaseModel):
    """Result of one tool invocation: text blocks plus an error flag."""

    content: list[TextBlock]
    is_error: bool = False

    @property
    def success(self) -> bool:
        return not self.is_error

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @classmethod
    def ok(cls, payload: Any) -> ToolOutcome:
        """Successful outcome carrying ``payload`` as indented JSON."""
        return cls(content=[TextBlock(text=to_json(payload))])

    @classmethod
    def error(cls, message: str) -> ToolOutcome:
        return cls(content=[TextBlock(text=message)], is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=b.text) for b in self.content],
            isError=self.is_error,
        )


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

Handler = Callable[[Any, Any], Awaitable[Any]]
WrappedHandler = Callable[[Mapping[str, Any] | None, Any], Awaitable[ToolOutcome]]

READ_ONLY = types.ToolAnnotations(
    readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True
)
WRITE = types.ToolAnnotations(
    readOnlyHint=False, destructiveHint=False, idempotentHint=False, openWorldHint=True
)
DESTRUCTIVE = types.ToolAnnotations(
    readOnlyHint=False, destructiveHint=True, idempotentHint=True, openWorldHint=True
)


@dataclass(frozen=True)
class ToolDescriptor:
    """Static declaration of one tool.

    ``error_context`` names the attempted operation in failure messages:
    ``"listing content"`` produces ``"Error listing content: <message>"``.
    """

    name: str
    description: str
    input_model: type[BaseModel]
    error_context: str | None = None
    annotations: types.ToolAnnotations | None = None

    @property
    def parameter_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def error_message(self, exc: BaseException) -> str:
        prefix = f"Error {self.error_context}" if self.error_context else "Error"
        return f"{prefix}: {describe_error(exc)}"

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.parameter_schema,
            annotations=self.annotations,
        )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class ToolCategory(str, Enum):
    """Tool groups selectable through ``ENABLED_TOOLS``."""

    ALL = "all"
    WORDPRESS = "wordpress"
    FLUENTCOMMUNITY = "fluentcommunity"
    FLUENTCART = "fluentcart"
    FLUENTCRM = "fluentcrm"
    MLPLUGINS = "mlplugins"
    DEBUG = "debug"


CATEGORY_ALIASES: dict[str, ToolCategory] = {
    "all": ToolCategory.ALL,
    "wordpress": ToolCategory.WORDPRESS,
    "wp": ToolCategory.WORDPRESS,
    "fluentcommunity": ToolCategory.FLUENTCOMMUNITY,
    "fluent-community": ToolCategory.FLUENTCOMMUNITY,
    "fluent_community": ToolCategory.FLUENTCOMMUNITY,
    "fluentcart": ToolCategory.FLUENTCART,
    "fluent-cart": ToolCategory.FLUENTCART,
    "fluent_cart": ToolCategory.FLUENTCART,
    "fluentcrm": ToolCategory.FLUENTCRM,
    "fluent-crm": ToolCategory.FLUENTCRM,
    "fluent_crm": ToolCategory.FLUENTCRM,
    "mlplugins": ToolCategory.MLPLUGINS,
    "ml-plugins": ToolCategory.MLPLUGINS,
    "ml_plugins": ToolCategory.MLPLUGINS,
    "debug": ToolCategory.DEBUG,
}


def select_category(value: str | None) -> ToolCategory:
    """Resolve a selector value to a category.

    Empty values and ``"all"`` select everything. Unknown values also select
    everything (with a warning) rather than refusing to start.
    """
    selector = (value or "").strip().lower()
    if not selector or selector == ToolCategory.ALL.value:
        logger.info("ENABLED_TOOLS not restricted, loading all tools")
        return ToolCategory.ALL

    category = CATEGORY_ALIASES.get(selector)
    if category is None:
        logger.warning("Unknown ENABLED_TOOLS value: %r. Loading all tools.", value)
        return ToolCategory.ALL

    logger.info("Loading only the %s tools", category.value)
    return category


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_EXPECTED_ERRORS = (TransportError, NotFoundError, ValidationError, ValueError)


def wrap_handler(descriptor: ToolDescriptor, handler: Handler) -> WrappedHandler:
    """Validate arguments, run ``handler`` and shape the result.

    A returned :class:`ToolOutcome` is passed through unchanged; any other
    value is wrapped with :meth:`ToolOutcome.ok`. Exceptions become error
    outcomes.
    """

    async def invoke(arguments: Mapping[str, Any] | None, ctx: Any) -> ToolOutcome:
        try:
            params = descriptor.input_model.model_validate(dict(arguments or {}))
            result = await handler(params, ctx)
        except _EXPECTED_ERRORS as e:
            logger.error("Tool %s failed: %s", descriptor.name, describe_error(e))
            return ToolOutcome.error(descriptor.error_message(e))
        except Exception as e:
            logger.exception("Unexpected error in tool %s", descriptor.name)
            return ToolOutcome.error(descriptor.error_message(e))

        if isinstance(result, ToolOutcome):
            return result
        return ToolOutcome.ok(result)

    invoke.__name__ = f"invoke_{descriptor.name}"
    return invoke


class ToolRegistry:
    """Active tool catalog: descriptors paired 1:1 with wrapped handlers."""

    def __init__(self):
        self._tools: dict[str, tuple[ToolDescriptor, WrappedHandler]] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(
        self, descriptors: Iterable[ToolDescriptor], handlers: Mapping[str, Handler]
    ) -> int:
        """Register every descriptor that has a handler of the same name.

        Descriptors without a handler are skipped with a warning.

        Returns:
            Number of tools registered.

        Raises:
            ValueError: If a tool name is already registered.
        """
        count = 0
        for descriptor in descriptors:
            handler = handlers.get(descriptor.name)
            if handler is None:
                logger.warning("No handler for tool: %s", descriptor.name)
                continue
            if descriptor.name in self._tools:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            self._tools[descriptor.name] = (descriptor, wrap_handler(descriptor, handler))
            count += 1
        return count

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name][0]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return [descriptor for descriptor, _ in self._tools.values()]

    def list_tools(self) -> list[types.Tool]:
        return [descriptor.to_mcp_tool() for descriptor in self.descriptors()]

    async def invoke(
        self, name: str, arguments: Mapping[str, Any] | None, ctx: Any
    ) -> ToolOutcome:
        """Run a tool by name. Never raises; failures are error outcomes."""
        entry = self._tools.get(name)
        if entry is None:
            error = UnknownToolError(name)
            logger.warning("%s", error)
            return ToolOutcome.error(str(error))
        _, handler = entry
        return await handler(arguments, ctx)
