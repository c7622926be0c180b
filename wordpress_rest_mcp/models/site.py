"""Input models for plugins, media, users, comments and the plugin directory."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import Context, PageInput, SortOrder

# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------

PLUGIN_DESCRIPTION = "Plugin slug (e.g. 'akismet/akismet', 'elementor/elementor')."


class ListPluginsInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    status: Literal["active", "inactive"] = Field(
        default="active", description="Filter plugins by status."
    )


class PluginInput(BaseModel):
    """Input naming one installed plugin."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    plugin: str = Field(..., description=PLUGIN_DESCRIPTION, min_length=1)


class CreatePluginInput(BaseModel):
    """Input for installing a plugin from WordPress.org."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    slug: str = Field(
        ..., description="WordPress.org plugin directory slug, e.g. 'akismet'.", min_length=1
    )
    status: Literal["inactive", "active"] = Field(
        default="active", description="Plugin activation status."
    )


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


class ListMediaInput(PageInput):
    search: str | None = Field(default=None, description="Search term for media.")


class CreateMediaInput(BaseModel):
    """Input for adding a media item, downloading ``source_url`` when it is http(s)."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Media title.")
    source_url: str = Field(..., description="Source URL of the media file.", min_length=1)
    alt_text: str | None = Field(default=None, description="Alternate text for the media.")
    caption: str | None = Field(default=None, description="Caption of the media.")
    description: str | None = Field(default=None, description="Description of the media.")


class EditMediaInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Media ID to edit.", ge=1)
    title: str | None = Field(default=None, description="Media title.")
    alt_text: str | None = Field(default=None, description="Alternate text for the media.")
    caption: str | None = Field(default=None, description="Caption of the media.")
    description: str | None = Field(default=None, description="Description of the media.")


class DeleteMediaInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Media ID to delete.", ge=1)
    force: bool | None = Field(default=None, description="Force deletion bypassing trash.")


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class ListUsersInput(PageInput):
    search: str | None = Field(default=None, description="Search term for user name.")
    context: Context | None = Field(default=None, description="Request scope.")
    orderby: (
        Literal["id", "include", "name", "registered_date", "slug", "email", "url"] | None
    ) = Field(default=None, description="Sort users by parameter.")
    order: SortOrder | None = Field(default=None, description="Order sort attribute.")
    roles: list[str] | None = Field(default=None, description="Role names to filter by.")


class GetUserInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="User ID.", ge=1)
    context: Context | None = Field(default=None, description="Request scope.")


class _UserFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str | None = Field(default=None, description="Display name.")
    first_name: str | None = Field(default=None, description="First name.")
    last_name: str | None = Field(default=None, description="Last name.")
    url: str | None = Field(default=None, description="URL of the user.")
    description: str | None = Field(default=None, description="Description of the user.")
    locale: str | None = Field(default=None, description="Locale for the user.")
    nickname: str | None = Field(default=None, description="Nickname.")
    slug: str | None = Field(default=None, description="Slug for the user.")
    roles: list[str] | None = Field(default=None, description="Roles assigned to the user.")


class CreateUserInput(_UserFields):
    username: str = Field(..., description="User login name.", min_length=1)
    email: str = Field(..., description="Email address.", pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., description="Password for the user.", min_length=1)


class UpdateUserInput(_UserFields):
    id: int = Field(..., description="User ID.", ge=1)
    username: str | None = Field(default=None, description="User login name.")
    email: str | None = Field(
        default=None, description="Email address.", pattern=r"^[^@\s]+@[^@\s]+$"
    )
    password: str | None = Field(default=None, description="Password for the user.")


class DeleteUserInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="User ID.", ge=1)
    force: bool = Field(default=True, description="Users cannot be trashed; must be true.")
    reassign: int | None = Field(default=None, description="User ID to reassign posts to.")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class ListCommentsInput(PageInput):
    search: str | None = Field(default=None, description="Search term for comment content.")
    after: str | None = Field(default=None, description="ISO8601 date; comments after it.")
    author: int | list[int] | None = Field(default=None, description="Author ID or IDs.")
    author_email: str | None = Field(default=None, description="Author email address.")
    author_exclude: list[int] | None = Field(default=None, description="Author IDs to exclude.")
    post: int | None = Field(default=None, description="Post ID to retrieve comments for.")
    status: Literal["approve", "hold", "spam", "trash"] | None = Field(
        default=None, description="Comment status."
    )
    type: str | None = Field(default=None, description="Comment type.")
    orderby: Literal["date", "date_gmt", "id", "include", "post", "parent", "type"] | None = (
        Field(default=None, description="Sort comments by parameter.")
    )
    order: SortOrder | None = Field(default=None, description="Order sort attribute.")


class GetCommentInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., description="Comment ID.", ge=1)


class CreateCommentInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    post: int = Field(..., description="ID of the post the comment is for.", ge=1)
    content: str = Field(..., description="The content of the comment.", min_length=1)
    author: int | None = Field(default=None, description="User ID of a registered author.")
    author_name: str | None = Field(default=None, description="Display name of the author.")
    author_email: str | None = Field(default=None, description="Email address of the author.")
    author_url: str | None = Field(default=None, description="URL of the author.")
    parent: int | None = Field(default=None, description="ID of the parent comment.")
    status: Literal["approve", "hold"] | None = Field(default=None, description="Comment state.")


class UpdateCommentInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Comment ID.", ge=1)
    post: int | None = Field(default=None, description="ID of the post the comment is for.")
    content: str | None = Field(default=None, description="The content of the comment.")
    author: int | None = Field(default=None, description="User ID of a registered author.")
    author_name: str | None = Field(default=None, description="Display name of the author.")
    author_email: str | None = Field(default=None, description="Email address of the author.")
    author_url: str | None = Field(default=None, description="URL of the author.")
    parent: int | None = Field(default=None, description="ID of the parent comment.")
    status: Literal["approve", "hold", "spam", "trash"] | None = Field(
        default=None, description="Comment state."
    )


class DeleteCommentInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., description="Comment ID.", ge=1)
    force: bool | None = Field(default=None, description="Bypass trash and delete permanently.")


# ---------------------------------------------------------------------------
# WordPress.org plugin directory
# ---------------------------------------------------------------------------


class SearchPluginRepositoryInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    search: str = Field(..., description="Search query for the plugin directory.", min_length=1)
    page: int = Field(default=1, description="Page number (1-based).", ge=1)
    per_page: int = Field(default=10, description="Results per page (max 100).", ge=1, le=100)


class GetPluginDetailsInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    slug: str = Field(..., description="Plugin slug on WordPress.org.", min_length=1)
