"""Pydantic input models for MCP tools."""

from .base import Context, EmptyInput, PageInput, SortOrder
from .content import (
    CreateContentInput,
    DeleteContentInput,
    DiscoverContentTypesInput,
    FindContentByUrlInput,
    GetContentBySlugInput,
    GetContentInput,
    ListContentInput,
    UpdateContentInput,
    UpdateFields,
)
from .site import (
    CreateCommentInput,
    CreateMediaInput,
    CreatePluginInput,
    CreateUserInput,
    DeleteCommentInput,
    DeleteMediaInput,
    DeleteUserInput,
    EditMediaInput,
    GetCommentInput,
    GetPluginDetailsInput,
    GetUserInput,
    ListCommentsInput,
    ListMediaInput,
    ListPluginsInput,
    ListUsersInput,
    PluginInput,
    SearchPluginRepositoryInput,
    UpdateCommentInput,
    UpdateUserInput,
)
from .taxonomies import (
    AssignTermsInput,
    CreateTermInput,
    DeleteTermInput,
    DiscoverTaxonomiesInput,
    GetContentTermsInput,
    GetTermInput,
    ListTermsInput,
    UpdateTermInput,
)

__all__ = [
    # Base
    "Context",
    "EmptyInput",
    "PageInput",
    "SortOrder",
    # Content
    "ListContentInput",
    "GetContentInput",
    "CreateContentInput",
    "UpdateContentInput",
    "DeleteContentInput",
    "DiscoverContentTypesInput",
    "UpdateFields",
    "FindContentByUrlInput",
    "GetContentBySlugInput",
    # Taxonomies
    "DiscoverTaxonomiesInput",
    "ListTermsInput",
    "GetTermInput",
    "CreateTermInput",
    "UpdateTermInput",
    "DeleteTermInput",
    "AssignTermsInput",
    "GetContentTermsInput",
    # Plugins
    "ListPluginsInput",
    "PluginInput",
    "CreatePluginInput",
    # Media
    "ListMediaInput",
    "CreateMediaInput",
    "EditMediaInput",
    "DeleteMediaInput",
    # Users
    "ListUsersInput",
    "GetUserInput",
    "CreateUserInput",
    "UpdateUserInput",
    "DeleteUserInput",
    # Comments
    "ListCommentsInput",
    "GetCommentInput",
    "CreateCommentInput",
    "UpdateCommentInput",
    "DeleteCommentInput",
    # Plugin directory
    "SearchPluginRepositoryInput",
    "GetPluginDetailsInput",
]
