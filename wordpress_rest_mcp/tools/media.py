"""Media library tools (``wp/v2/media``)."""

from __future__ import annotations

import re
from typing import Any

from ..config import logger
from ..models.site import CreateMediaInput, DeleteMediaInput, EditMediaInput, ListMediaInput
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import params_dict, rest_tool

TOOLS = [
    ToolDescriptor(
        name="list_media",
        description="List media items with filtering and pagination.",
        input_model=ListMediaInput,
        error_context="listing media",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="create_media",
        description=(
            "Create a media item. An http(s) source_url is downloaded and "
            "uploaded to the media library."
        ),
        input_model=CreateMediaInput,
        error_context="creating media",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="edit_media",
        description="Edit an existing media item.",
        input_model=EditMediaInput,
        error_context="editing media",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="delete_media",
        description="Delete a media item.",
        input_model=DeleteMediaInput,
        error_context="deleting media",
        annotations=DESTRUCTIVE,
    ),
]


def upload_filename(title: str) -> str:
    """``"My Photo"`` -> ``"My_Photo.jpg"``."""
    if not title:
        return "upload.jpg"
    return re.sub(r"\s+", "_", title) + ".jpg"


async def create_media(params: CreateMediaInput, ctx) -> Any:
    """Create a media item, downloading and uploading ``source_url`` if remote.

    Returns:
        The created attachment.
    """
    if not params.source_url.startswith("http"):
        return await ctx.client.request("POST", "wp/v2/media", params_dict(params))

    content, content_type = await ctx.client.download(params.source_url)
    filename = upload_filename(params.title)
    logger.info("Uploading %s (%d bytes) as %s", params.source_url, len(content), filename)

    fields = {
        key: value
        for key, value in params_dict(params, exclude={"source_url"}).items()
        if value
    }
    response = await ctx.client.request(
        "POST",
        "wp/v2/media",
        fields,
        files={"file": (filename, content, content_type)},
        raw_response=True,
    )
    return response["data"]


HANDLERS = {
    "list_media": rest_tool("GET", "wp/v2/media"),
    "create_media": create_media,
    "edit_media": rest_tool("POST", "wp/v2/media/{id}"),
    "delete_media": rest_tool("DELETE", "wp/v2/media/{id}"),
}
