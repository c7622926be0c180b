"""Shared helpers for tool modules."""

from __future__ import annotations

from collections.abc import Mapping
from string import Formatter
from typing import Any

from pydantic import BaseModel


def params_dict(params: BaseModel, exclude: set[str] | None = None) -> dict[str, Any]:
    """Dump validated input for the wire, dropping unset optional fields."""
    return params.model_dump(mode="json", exclude_none=True, exclude=exclude)


def rest_tool(
    method: str,
    route: str,
    *,
    rename: Mapping[str, str] | None = None,
    wrap: str | None = None,
    query: tuple[str, ...] = (),
):
    """Build a handler that forwards its input to one REST route.

    Fields named in ``route`` (``"fluent-crm/v2/contacts/{id}"``) are
    substituted into the path and removed from the payload. The remaining
    fields become the query string for GET and the JSON body otherwise.

    Args:
        method: HTTP method.
        route: Path template relative to the REST root.
        rename: Input field -> wire name (e.g. ``{"limit": "per_page"}``).
        wrap: Send the payload nested under this key.
        query: Fields sent in the query string whatever the method.
    """
    path_fields = [field for _, field, _, _ in Formatter().parse(route) if field]

    async def handler(params: BaseModel, ctx) -> Any:
        data = params_dict(params)
        path = route.format(**{field: data.pop(field) for field in path_fields})
        for source, target in (rename or {}).items():
            if source in data:
                data[target] = data.pop(source)
        extra = {}
        if query:
            extra["query"] = {field: data.pop(field) for field in query if field in data}
        if wrap:
            data = {wrap: data}
        return await ctx.client.request(method, path, data or None, **extra)

    return handler
