"""FluentCommunity tools: posts, spaces, comments, members, search and design."""

from __future__ import annotations

import re
from typing import Any

from ..models.base import EmptyInput
from ..models.fluent import (
    AddSpaceMemberInput,
    CommunityPostInput,
    CreateCommunityCommentInput,
    CreateCommunityPostInput,
    CreateSpaceInput,
    ListCommunityCommentsInput,
    ListCommunityPostsInput,
    ListSpaceMembersInput,
    ListSpacesInput,
    RemoveSpaceMemberInput,
    SearchCommunityInput,
    SpaceInput,
    UpdateColorsInput,
    UpdateCommunityPostInput,
    UpdateLayoutInput,
    UpdateSpaceInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import params_dict, rest_tool

NAMESPACE = "fc-manager/v1"
COLOR_CONFIG = "fluent-community/v2/settings/color-config"

# FluentCommunity list endpoints take per_page; tools expose it as limit
PAGED = {"limit": "per_page"}

TOOLS = [
    # Posts
    ToolDescriptor(
        name="fc_list_posts",
        description="List community posts, filtered by space, user, status or type.",
        input_model=ListCommunityPostsInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_get_post",
        description="Get a community post by ID.",
        input_model=CommunityPostInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_create_post",
        description="Create a new post in a FluentCommunity space.",
        input_model=CreateCommunityPostInput,
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fc_update_post",
        description="Update an existing FluentCommunity post.",
        input_model=UpdateCommunityPostInput,
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fc_delete_post",
        description="Delete a FluentCommunity post.",
        input_model=CommunityPostInput,
        annotations=DESTRUCTIVE,
    ),
    # Spaces
    ToolDescriptor(
        name="fc_list_spaces",
        description="List all spaces in FluentCommunity.",
        input_model=ListSpacesInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_get_space",
        description="Get detailed information about a specific space.",
        input_model=SpaceInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_create_space",
        description="Create a new space. The slug defaults to the hyphenated title.",
        input_model=CreateSpaceInput,
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fc_update_space",
        description="Update an existing space.",
        input_model=UpdateSpaceInput,
        annotations=WRITE,
    ),
    # Comments
    ToolDescriptor(
        name="fc_list_comments",
        description="List FluentCommunity comments.",
        input_model=ListCommunityCommentsInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_create_comment",
        description="Create a new comment on a community post.",
        input_model=CreateCommunityCommentInput,
        annotations=WRITE,
    ),
    # Space members
    ToolDescriptor(
        name="fc_list_space_members",
        description="List members of a space.",
        input_model=ListSpaceMembersInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_add_space_member",
        description="Add a user to a space.",
        input_model=AddSpaceMemberInput,
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fc_remove_space_member",
        description="Remove a user from a space.",
        input_model=RemoveSpaceMemberInput,
        annotations=DESTRUCTIVE,
    ),
    # Search
    ToolDescriptor(
        name="fc_search_content",
        description="Search community posts, comments and spaces.",
        input_model=SearchCommunityInput,
        annotations=READ_ONLY,
    ),
    # Design
    ToolDescriptor(
        name="fc_get_colors",
        description="Get the FluentCommunity color scheme.",
        input_model=EmptyInput,
        error_context="getting colors",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_update_colors",
        description="Update FluentCommunity colors for the light or dark mode.",
        input_model=UpdateColorsInput,
        error_context="updating colors",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fc_get_layout",
        description="Get the FluentCommunity portal layout settings.",
        input_model=EmptyInput,
        error_context="getting layout settings",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fc_update_layout",
        description="Update the FluentCommunity portal layout settings.",
        input_model=UpdateLayoutInput,
        error_context="updating layout settings",
        annotations=WRITE,
    ),
]


def space_slug(title: str) -> str:
    return re.sub(r"\s+", "-", title.lower())


async def create_space(params: CreateSpaceInput, ctx) -> Any:
    body = params_dict(params)
    body.setdefault("slug", space_slug(params.title))
    return await ctx.client.request("POST", f"{NAMESPACE}/spaces", body)


HANDLERS = {
    "fc_list_posts": rest_tool("GET", f"{NAMESPACE}/posts", rename=PAGED),
    "fc_get_post": rest_tool("GET", f"{NAMESPACE}/posts/{{post_id}}"),
    "fc_create_post": rest_tool("POST", f"{NAMESPACE}/posts"),
    "fc_update_post": rest_tool("PUT", f"{NAMESPACE}/posts/{{post_id}}"),
    "fc_delete_post": rest_tool("DELETE", f"{NAMESPACE}/posts/{{post_id}}"),
    "fc_list_spaces": rest_tool("GET", f"{NAMESPACE}/spaces", rename=PAGED),
    "fc_get_space": rest_tool("GET", f"{NAMESPACE}/spaces/{{space_id}}"),
    "fc_create_space": create_space,
    "fc_update_space": rest_tool("PUT", f"{NAMESPACE}/spaces/{{space_id}}"),
    "fc_list_comments": rest_tool("GET", f"{NAMESPACE}/comments", rename=PAGED),
    "fc_create_comment": rest_tool("POST", f"{NAMESPACE}/comments"),
    "fc_list_space_members": rest_tool(
        "GET", f"{NAMESPACE}/spaces/{{space_id}}/members", rename=PAGED
    ),
    # The members endpoint reads user_id and role from the query string
    "fc_add_space_member": rest_tool(
        "POST", f"{NAMESPACE}/spaces/{{space_id}}/members", query=("user_id", "role")
    ),
    "fc_remove_space_member": rest_tool(
        "DELETE", f"{NAMESPACE}/spaces/{{space_id}}/members/{{user_id}}"
    ),
    "fc_search_content": rest_tool("GET", f"{NAMESPACE}/search", rename=PAGED),
    "fc_get_colors": rest_tool("GET", COLOR_CONFIG),
    "fc_update_colors": rest_tool("POST", COLOR_CONFIG),
    "fc_get_layout": rest_tool("GET", f"{NAMESPACE}/settings/layout"),
    "fc_update_layout": rest_tool("PUT", f"{NAMESPACE}/settings/layout"),
}
