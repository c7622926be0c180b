"""Base types and enums for MCP tool input models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    """Sort direction accepted by WordPress collections."""

    ASC = "asc"
    DESC = "desc"


class Context(str, Enum):
    """Scope under which a WordPress request is made."""

    VIEW = "view"
    EMBED = "embed"
    EDIT = "edit"


class EmptyInput(BaseModel):
    """Input for tools without parameters."""

    model_config = ConfigDict(extra="forbid")


class PageInput(BaseModel):
    """Common pagination parameters."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    page: int | None = Field(default=None, description="Page number (default 1).", ge=1)
    per_page: int | None = Field(
        default=None, description="Items per page (default 10, max 100).", ge=1, le=100
    )
