"""Input models for the FluentCRM, FluentCart and FluentCommunity tools."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import PageInput


class _Input(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class IdInput(_Input):
    """Input naming one record by ID."""

    id: int = Field(..., description="Record ID.", ge=1)


# ---------------------------------------------------------------------------
# FluentCRM
# ---------------------------------------------------------------------------


class ListContactsInput(PageInput):
    search: str | None = Field(default=None, description="Search by name or email.")
    status: Literal["subscribed", "unsubscribed", "bounced", "complained"] | None = None
    tags: list[int] | None = Field(default=None, description="Tag IDs to filter by.")
    lists: list[int] | None = Field(default=None, description="List IDs to filter by.")


class CreateContactInput(_Input):
    email: str = Field(..., description="Contact email.", pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = None
    last_name: str | None = None
    status: Literal["subscribed", "unsubscribed", "pending"] | None = None
    tags: list[int] | None = Field(default=None, description="Tag IDs to attach.")
    lists: list[int] | None = Field(default=None, description="List IDs to attach.")
    custom_fields: dict[str, Any] | None = None


class UpdateContactInput(_Input):
    id: int = Field(..., description="Contact ID.", ge=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = None
    last_name: str | None = None
    status: Literal["subscribed", "unsubscribed", "pending"] | None = None
    custom_fields: dict[str, Any] | None = None


class SearchPageInput(PageInput):
    search: str | None = Field(default=None, description="Search term.")


class CreateSegmentInput(_Input):
    """Input for creating a FluentCRM list or tag."""

    title: str = Field(..., description="Title.", min_length=1)
    slug: str | None = None
    description: str | None = None


class UpdateSegmentInput(_Input):
    id: int = Field(..., description="Record ID.", ge=1)
    title: str | None = None
    slug: str | None = None
    description: str | None = None


class ListCampaignsInput(PageInput):
    status: Literal["draft", "scheduled", "sent", "archived"] | None = None


class CreateCampaignInput(_Input):
    title: str = Field(..., description="Campaign title.", min_length=1)
    subject: str = Field(..., description="Email subject.", min_length=1)
    email_body: str = Field(..., description="Email body (HTML).")
    status: Literal["draft", "scheduled"] | None = None
    scheduled_at: str | None = Field(default=None, description="Send time (Y-m-d H:i:s).")


class SendCampaignInput(_Input):
    id: int = Field(..., description="Campaign ID.", ge=1)
    subscriber_ids: list[int] | None = Field(
        default=None, description="Limit sending to these contacts."
    )


# ---------------------------------------------------------------------------
# FluentCart
# ---------------------------------------------------------------------------


class ListProductsInput(PageInput):
    search: str | None = Field(default=None, description="Search product name/description.")
    status: Literal["publish", "draft", "pending"] | None = None
    category: int | None = Field(default=None, description="Category ID filter.")


class ProductInput(_Input):
    product_id: int = Field(..., description="Product ID.", ge=1)


class CreateProductInput(_Input):
    name: str = Field(..., description="Product name.", min_length=1)
    price: float = Field(..., description="Product price.", ge=0)
    description: str | None = None
    sale_price: float | None = Field(default=None, ge=0)
    sku: str | None = None
    stock_quantity: int | None = None
    categories: list[int] | None = None
    images: list[str] | None = Field(default=None, description="Image URLs.")
    status: Literal["publish", "draft"] | None = None


class UpdateProductInput(_Input):
    product_id: int = Field(..., description="Product ID.", ge=1)
    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    sale_price: float | None = Field(default=None, ge=0)
    sku: str | None = None
    stock_quantity: int | None = None
    status: Literal["publish", "draft"] | None = None


class DeleteProductInput(_Input):
    product_id: int = Field(..., description="Product ID.", ge=1)
    force: bool | None = Field(default=None, description="Bypass trash.")


class ListOrdersInput(PageInput):
    status: Literal["pending", "processing", "completed", "cancelled", "refunded"] | None = None
    customer_id: int | None = None
    date_from: str | None = Field(default=None, description="Start date (YYYY-MM-DD).")
    date_to: str | None = Field(default=None, description="End date (YYYY-MM-DD).")


class OrderInput(_Input):
    order_id: int = Field(..., description="Order ID.", ge=1)


class OrderLine(_Input):
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1)


class CreateOrderInput(_Input):
    customer_id: int = Field(..., description="Customer ID.", ge=1)
    products: list[OrderLine] = Field(..., description="Products in the order.", min_length=1)
    status: Literal["pending", "processing", "completed"] | None = None


class UpdateOrderInput(_Input):
    order_id: int = Field(..., description="Order ID.", ge=1)
    status: Literal["pending", "processing", "completed", "cancelled", "refunded"] | None = None
    note: str | None = Field(default=None, description="Order note.")


class ListCustomersInput(PageInput):
    search: str | None = None


class CustomerInput(_Input):
    customer_id: int = Field(..., description="Customer ID.", ge=1)


class CreateCustomerInput(_Input):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class ListCouponsInput(PageInput):
    status: Literal["active", "inactive", "expired"] | None = None


class CreateCouponInput(_Input):
    code: str = Field(..., description="Coupon code.", min_length=1)
    type: Literal["percentage", "fixed"] = Field(..., description="Discount type.")
    amount: float = Field(..., description="Discount amount.", ge=0)
    min_purchase: float | None = Field(default=None, ge=0)
    max_uses: int | None = Field(default=None, ge=1)
    expires_at: str | None = Field(default=None, description="Expiry date (YYYY-MM-DD).")


class CouponInput(_Input):
    coupon_id: int = Field(..., description="Coupon ID.", ge=1)


# ---------------------------------------------------------------------------
# FluentCommunity
# ---------------------------------------------------------------------------


class ListCommunityPostsInput(_Input):
    space_id: int | None = None
    user_id: int | None = None
    status: Literal["published", "draft", "pending", "archived"] | None = None
    type: str | None = Field(default=None, description="Post type (text, video, etc.).")
    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)
    search: str | None = None


class CommunityPostInput(_Input):
    post_id: int = Field(..., description="Community post ID.", ge=1)


class CreateCommunityPostInput(_Input):
    space_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    message: str = Field(..., description="Post content.", min_length=1)
    title: str | None = None
    type: str = "text"
    status: Literal["published", "draft", "pending"] = "published"
    privacy: Literal["public", "private", "friends"] = "public"


class UpdateCommunityPostInput(_Input):
    post_id: int = Field(..., ge=1)
    title: str | None = None
    message: str | None = None
    status: Literal["published", "draft", "pending", "archived"] | None = None
    privacy: Literal["public", "private", "friends"] | None = None


class ListSpacesInput(_Input):
    status: Literal["active", "inactive", "archived"] | None = None
    privacy: Literal["public", "private"] | None = None
    limit: int = Field(default=20, ge=1)
    search: str | None = None


class SpaceInput(_Input):
    space_id: int = Field(..., description="Space ID.", ge=1)


class CreateSpaceInput(_Input):
    title: str = Field(..., min_length=1)
    slug: str | None = None
    description: str | None = None
    privacy: Literal["public", "private"] = "public"
    status: Literal["active", "inactive"] = "active"


class UpdateSpaceInput(_Input):
    space_id: int = Field(..., ge=1)
    title: str | None = None
    description: str | None = None
    privacy: Literal["public", "private"] | None = None
    status: Literal["active", "inactive", "archived"] | None = None


class ListCommunityCommentsInput(_Input):
    post_id: int | None = None
    user_id: int | None = None
    limit: int = Field(default=50, ge=1)


class CreateCommunityCommentInput(_Input):
    post_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    message: str = Field(..., min_length=1)


class ListSpaceMembersInput(_Input):
    space_id: int = Field(..., ge=1)
    status: Literal["active", "pending", "banned"] | None = None
    limit: int = Field(default=50, ge=1)


class AddSpaceMemberInput(_Input):
    space_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    role: str = Field(default="member", description="Member role in the space.")


class RemoveSpaceMemberInput(_Input):
    space_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)


class SearchCommunityInput(_Input):
    query: str = Field(..., min_length=1)
    content_type: Literal["all", "posts", "comments", "spaces"] = "all"
    space_id: int | None = None
    limit: int = Field(default=20, ge=1)


class UpdateColorsInput(_Input):
    mode: Literal["light", "dark"] = "light"
    colors: dict[str, str] = Field(..., description="Color variables to set (name -> hex).")


class UpdateLayoutInput(_Input):
    layout: dict[str, Any] = Field(
        ...,
        description=(
            "Layout settings: menu_position (top/side), sidebar_position (left/right), "
            "hide_* component flags and custom_*_content HTML."
        ),
    )
