"""Input models for taxonomy and term tools."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import PageInput, SortOrder

TAXONOMY_DESCRIPTION = "The taxonomy slug (e.g. 'category', 'post_tag', or a custom taxonomy)."


class DiscoverTaxonomiesInput(BaseModel):
    """Input for taxonomy discovery."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    content_type: str | None = Field(
        default=None, description="Only taxonomies attached to this content type."
    )
    refresh_cache: bool = Field(default=False, description="Force refresh the taxonomies cache.")


class ListTermsInput(PageInput):
    """Input for listing terms of any taxonomy."""

    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    search: str | None = Field(default=None, description="Search term for term name.")
    parent: int | None = Field(default=None, description="Parent term ID (direct children only).")
    slug: str | None = Field(default=None, description="Limit result to a specific slug.")
    hide_empty: bool | None = Field(
        default=None, description="Hide terms not assigned to any content."
    )
    orderby: (
        Literal["id", "include", "name", "slug", "term_group", "description", "count"] | None
    ) = Field(default=None, description="Sort terms by parameter.")
    order: SortOrder | None = Field(default=None, description="Order sort attribute.")


class GetTermInput(BaseModel):
    """Input for fetching one term."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Term ID.", ge=1)


class CreateTermInput(BaseModel):
    """Input for creating a term."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    name: str = Field(..., description="Term name.", min_length=1)
    slug: str | None = Field(default=None, description="Term slug.")
    parent: int | None = Field(default=None, description="Parent term ID.")
    description: str | None = Field(default=None, description="Term description.")
    meta: dict[str, Any] | None = Field(default=None, description="Term meta fields.")


class UpdateTermInput(BaseModel):
    """Input for updating a term."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Term ID.", ge=1)
    name: str | None = Field(default=None, description="Term name.")
    slug: str | None = Field(default=None, description="Term slug.")
    parent: int | None = Field(default=None, description="Parent term ID.")
    description: str | None = Field(default=None, description="Term description.")
    meta: dict[str, Any] | None = Field(default=None, description="Term meta fields.")


class DeleteTermInput(BaseModel):
    """Input for deleting a term. Terms cannot be trashed."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    id: int = Field(..., description="Term ID.", ge=1)
    force: bool = Field(
        default=True, description="Ignored; terms are always deleted permanently."
    )


class AssignTermsInput(BaseModel):
    """Input for assigning terms to a content item."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    content_id: int = Field(..., description="The content ID.", ge=1)
    content_type: str = Field(..., description="The content type slug.", min_length=1)
    taxonomy: str = Field(..., description=TAXONOMY_DESCRIPTION, min_length=1)
    terms: list[int | str] = Field(..., description="Term IDs or slugs to assign.")
    append: bool = Field(
        default=False,
        description="Append to the existing terms instead of replacing them.",
    )


class GetContentTermsInput(BaseModel):
    """Input for reading the terms assigned to a content item."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    content_id: int = Field(..., description="The content ID.", ge=1)
    content_type: str = Field(..., description="The content type slug.", min_length=1)
    taxonomy: str | None = Field(
        default=None, description="Only this taxonomy (default: every taxonomy of the type)."
    )
