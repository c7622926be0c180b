"""Input models for content tools (posts, pages and custom post types)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import PageInput, SortOrder

CONTENT_TYPE_DESCRIPTION = (
    "The content type slug (e.g. 'post', 'page', 'product', 'documentation')."
)


class ListContentInput(PageInput):
    """Input for listing content of any type."""

    content_type: str = Field(..., description=CONTENT_TYPE_DESCRIPTION, min_length=1)
    search: str | None = Field(default=None, description="Search term for title or body.")
    slug: str | None = Field(default=None, description="Limit result to a specific slug.")
    status: str | None = Field(default=None, description="Content status (publish, draft, etc.).")
    author: int | list[int] | None = Field(default=None, description="Author ID or list of IDs.")
    categories: int | list[int] | None = Field(
        default=None, description="Category ID or list of IDs (for posts)."
    )
    tags: int | list[int] | None = Field(
        default=None, description="Tag ID or list of IDs (for posts)."
    )
    parent: int | None = Field(
        default=None, description="Parent ID (for hierarchical content like pages)."
    )
    orderby: str | None = Field(default=None, description="Sort content by parameter.")
    order: SortOrder | None = Field(default=None, description="Order sort attribute.")
    after: str | None = Field(
        default=None, description="ISO8601 date; only content published after it."
    )
    before: str | None = Field(
        default=None, description="ISO8601 date; only content published before it."
    )


class GetContentInput(BaseModel):
    """Input for fetching one content item."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    content_type: str = Field(..., description=CONTENT_TYPE_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Content ID.", ge=1)


class _ContentFields(BaseModel):
    """Writable fields shared by create and update."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    excerpt: str | None = Field(default=None, description="Content excerpt.")
    slug: str | None = Field(default=None, description="Content slug.")
    author: int | None = Field(default=None, description="Author ID.")
    parent: int | None = Field(default=None, description="Parent ID (for hierarchical content).")
    categories: list[int] | None = Field(default=None, description="Category IDs (for posts).")
    tags: list[int] | None = Field(default=None, description="Tag IDs (for posts).")
    featured_media: int | None = Field(default=None, description="Featured image ID.")
    format: str | None = Field(default=None, description="Content format.")
    menu_order: int | None = Field(default=None, description="Menu order (for pages).")
    meta: dict[str, Any] | None = Field(default=None, description="Meta fields.")
    custom_fields: dict[str, Any] | None = Field(
        default=None, description="Custom fields specific to this content type."
    )


class CreateContentInput(_ContentFields):
    """Input for creating content."""

    content_type: str = Field(..., description=CONTENT_TYPE_DESCRIPTION, min_length=1)
    title: str = Field(..., description="Content title.")
    content: str = Field(..., description="Content body.")
    status: str = Field(default="draft", description="Content status.")


class UpdateContentInput(_ContentFields):
    """Input for updating content. Only provided fields are sent."""

    content_type: str = Field(..., description=CONTENT_TYPE_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Content ID.", ge=1)
    title: str | None = Field(default=None, description="Content title.")
    content: str | None = Field(default=None, description="Content body.")
    status: str | None = Field(default=None, description="Content status.")


class DeleteContentInput(BaseModel):
    """Input for deleting content."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    content_type: str = Field(..., description=CONTENT_TYPE_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Content ID.", ge=1)
    force: bool = Field(default=False, description="Bypass trash and delete permanently.")


class DiscoverContentTypesInput(BaseModel):
    """Input for content type discovery."""

    model_config = ConfigDict(extra="forbid")

    refresh_cache: bool = Field(default=False, description="Force refresh the content types cache.")


class UpdateFields(BaseModel):
    """Fields applied to content found by URL."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str | None = None
    content: str | None = None
    status: str | None = None
    meta: dict[str, Any] | None = None
    custom_fields: dict[str, Any] | None = None


class FindContentByUrlInput(BaseModel):
    """Input for locating content from its public URL."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    url: str = Field(..., description="The full URL of the content to find.", min_length=1)
    update_fields: UpdateFields | None = Field(
        default=None, description="Optional fields to update after finding the content."
    )


class GetContentBySlugInput(BaseModel):
    """Input for searching a slug across content types."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    slug: str = Field(..., description="The slug to search for.", min_length=1)
    content_types: list[str] | None = Field(
        default=None, description="Content types to search in (defaults to all)."
    )
