"""ML plugin tools: Canvas pages, AI image editor and Media Hub search."""

from __future__ import annotations

from ..models.base import EmptyInput
from ..models.ml import (
    CanvasCreatePageInput,
    CanvasEditPageInput,
    EditImageInput,
    GenerateImageInput,
    ListImagesInput,
    SearchImagesInput,
)
from ..registry import READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

CANVAS = "fc-manager/v1/canvas"
IMAGE = "ml-image/v1"
MEDIA_HUB = "fc-manager/v1/mediahub"

TOOLS = [
    ToolDescriptor(
        name="mlcanvas_create_page",
        description=(
            "Create a custom HTML/CSS page with ML Canvas Block, optionally "
            "hiding the theme header, footer and title."
        ),
        input_model=CanvasCreatePageInput,
        error_context="creating canvas page",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="mlcanvas_edit_page",
        description="Edit an ML Canvas page with find/replace on its HTML or CSS.",
        input_model=CanvasEditPageInput,
        error_context="editing canvas page",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="mlcanvas_get_docs",
        description="Get the ML Canvas API documentation and usage examples.",
        input_model=EmptyInput,
        error_context="getting canvas docs",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="mlimg_generate",
        description="Generate an AI image from a text prompt.",
        input_model=GenerateImageInput,
        error_context="generating image",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="mlimg_edit",
        description="Edit an existing image with an AI prompt.",
        input_model=EditImageInput,
        error_context="editing image",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="mlimg_list_images",
        description="List AI-generated images.",
        input_model=ListImagesInput,
        error_context="listing images",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="mlimg_health",
        description="Check the ML Image Editor service status.",
        input_model=EmptyInput,
        error_context="checking image service",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="mlmh_search_images",
        description="Search the web for images through ML Media Hub.",
        input_model=SearchImagesInput,
        error_context="searching images",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="mlmh_list_categories",
        description="List ML Media Hub categories.",
        input_model=EmptyInput,
        error_context="listing media categories",
        annotations=READ_ONLY,
    ),
]

HANDLERS = {
    "mlcanvas_create_page": rest_tool("POST", f"{CANVAS}/create-page"),
    "mlcanvas_edit_page": rest_tool("POST", f"{CANVAS}/edit-page"),
    "mlcanvas_get_docs": rest_tool("GET", f"{CANVAS}/api-docs"),
    "mlimg_generate": rest_tool("POST", f"{IMAGE}/generate"),
    "mlimg_edit": rest_tool("POST", f"{IMAGE}/edit"),
    "mlimg_list_images": rest_tool("GET", f"{IMAGE}/ai-images"),
    "mlimg_health": rest_tool("GET", f"{IMAGE}/health"),
    "mlmh_search_images": rest_tool("POST", f"{MEDIA_HUB}/search-images"),
    "mlmh_list_categories": rest_tool("GET", f"{MEDIA_HUB}/categories"),
}
