"""Input models for the ML Canvas, ML Image Editor and ML Media Hub tools."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CanvasCreatePageInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Page title.", min_length=1)
    html: str | None = Field(default=None, description="Custom HTML content.")
    css: str | None = Field(default=None, description="Custom CSS styles.")
    hideHeader: bool | None = Field(default=None, description="Hide site header.")
    hideFooter: bool | None = Field(default=None, description="Hide site footer.")
    canvasMode: bool | None = Field(
        default=None, description="Full-width canvas mode (100% width, zero padding)."
    )
    hideTitle: bool | None = Field(default=None, description="Hide page title/hero section.")
    status: Literal["draft", "publish"] | None = Field(default=None, description="Page status.")


class CanvasEditPageInput(BaseModel):
    """Find/replace edit of an ML Canvas page."""

    model_config = ConfigDict(extra="forbid")

    page_id: int = Field(..., description="Page/Post ID to edit.", ge=1)
    find_html: str | None = None
    replace_html: str | None = None
    find_css: str | None = None
    replace_css: str | None = None


class GenerateImageInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    prompt: str = Field(..., description="Text description of the image.", min_length=1)
    aspectRatio: Literal["1:1", "4:3", "16:9", "9:16"] | None = Field(
        default=None, description="Image aspect ratio (default 1:1)."
    )
    selectedImages: list[int] | None = Field(
        default=None, description="Reference image attachment IDs."
    )
    externalImageUrl: str | None = Field(default=None, description="External reference image URL.")


class EditImageInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    imageId: int = Field(..., description="Attachment ID to edit.", ge=1)
    prompt: str = Field(..., description="How to modify the image.", min_length=1)
    preserveOriginal: bool | None = Field(default=None, description="Keep the original image.")


class ListImagesInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)
    category: str | None = Field(default=None, description="Image category filter.")


class SearchImagesInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    query: str = Field(..., description="Search query for images.", min_length=1)
    num: int = Field(default=10, description="Number of results (1-50).", ge=1, le=50)
    size: Literal["large", "medium", "icon"] | None = None
    types: Literal["photo", "clipart", "lineart", "animated"] | None = None
    license: Literal["creative_commons", "public_domain"] | None = None
