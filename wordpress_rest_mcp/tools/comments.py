"""Comment tools (``wp/v2/comments``)."""

from __future__ import annotations

from ..models.site import (
    CreateCommentInput,
    DeleteCommentInput,
    GetCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

TOOLS = [
    ToolDescriptor(
        name="list_comments",
        description="List comments with filtering, sorting, and pagination options.",
        input_model=ListCommentsInput,
        error_context="listing comments",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_comment",
        description="Get a comment by ID.",
        input_model=GetCommentInput,
        error_context="getting comment",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="create_comment",
        description="Create a new comment on a post.",
        input_model=CreateCommentInput,
        error_context="creating comment",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="update_comment",
        description="Update an existing comment.",
        input_model=UpdateCommentInput,
        error_context="updating comment",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="delete_comment",
        description="Delete a comment (to trash unless force is true).",
        input_model=DeleteCommentInput,
        error_context="deleting comment",
        annotations=DESTRUCTIVE,
    ),
]

HANDLERS = {
    "list_comments": rest_tool("GET", "wp/v2/comments"),
    "get_comment": rest_tool("GET", "wp/v2/comments/{id}"),
    "create_comment": rest_tool("POST", "wp/v2/comments"),
    "update_comment": rest_tool("POST", "wp/v2/comments/{id}"),
    "delete_comment": rest_tool("DELETE", "wp/v2/comments/{id}"),
}
