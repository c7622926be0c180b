"""User tools (``wp/v2/users``)."""

from __future__ import annotations

from ..models.site import (
    CreateUserInput,
    DeleteUserInput,
    GetUserInput,
    ListUsersInput,
    UpdateUserInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

TOOLS = [
    ToolDescriptor(
        name="list_users",
        description="List users with filtering, sorting, and pagination options.",
        input_model=ListUsersInput,
        error_context="listing users",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_user",
        description="Get a user by ID.",
        input_model=GetUserInput,
        error_context="getting user",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="create_user",
        description="Create a new user.",
        input_model=CreateUserInput,
        error_context="creating user",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="update_user",
        description="Update an existing user.",
        input_model=UpdateUserInput,
        error_context="updating user",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="delete_user",
        description="Delete a user, optionally reassigning their content to another user.",
        input_model=DeleteUserInput,
        error_context="deleting user",
        annotations=DESTRUCTIVE,
    ),
]

HANDLERS = {
    "list_users": rest_tool("GET", "wp/v2/users"),
    "get_user": rest_tool("GET", "wp/v2/users/{id}"),
    "create_user": rest_tool("POST", "wp/v2/users"),
    "update_user": rest_tool("POST", "wp/v2/users/{id}"),
    "delete_user": rest_tool("DELETE", "wp/v2/users/{id}"),
}
