"""FluentCart tools: products, orders, customers and coupons."""

from __future__ import annotations

from ..models.fluent import (
    CouponInput,
    CreateCouponInput,
    CreateCustomerInput,
    CreateOrderInput,
    CreateProductInput,
    CustomerInput,
    DeleteProductInput,
    ListCouponsInput,
    ListCustomersInput,
    ListOrdersInput,
    ListProductsInput,
    OrderInput,
    ProductInput,
    UpdateOrderInput,
    UpdateProductInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

NAMESPACE = "fc-manager/v1/fluentcart"

TOOLS = [
    # Products
    ToolDescriptor(
        name="fcart_list_products",
        description="List FluentCart products with filtering and pagination.",
        input_model=ListProductsInput,
        error_context="listing products",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_get_product",
        description="Get a FluentCart product by ID.",
        input_model=ProductInput,
        error_context="getting product",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_create_product",
        description="Create a FluentCart product.",
        input_model=CreateProductInput,
        error_context="creating product",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fcart_update_product",
        description="Update a FluentCart product.",
        input_model=UpdateProductInput,
        error_context="updating product",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fcart_delete_product",
        description="Delete a FluentCart product.",
        input_model=DeleteProductInput,
        error_context="deleting product",
        annotations=DESTRUCTIVE,
    ),
    # Orders
    ToolDescriptor(
        name="fcart_list_orders",
        description="List FluentCart orders filtered by status, customer or date range.",
        input_model=ListOrdersInput,
        error_context="listing orders",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_get_order",
        description="Get a FluentCart order by ID.",
        input_model=OrderInput,
        error_context="getting order",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_create_order",
        description="Create a FluentCart order for a customer.",
        input_model=CreateOrderInput,
        error_context="creating order",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fcart_update_order",
        description="Update a FluentCart order's status or add a note.",
        input_model=UpdateOrderInput,
        error_context="updating order",
        annotations=WRITE,
    ),
    # Customers
    ToolDescriptor(
        name="fcart_list_customers",
        description="List FluentCart customers.",
        input_model=ListCustomersInput,
        error_context="listing customers",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_get_customer",
        description="Get a FluentCart customer by ID.",
        input_model=CustomerInput,
        error_context="getting customer",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_create_customer",
        description="Create a FluentCart customer.",
        input_model=CreateCustomerInput,
        error_context="creating customer",
        annotations=WRITE,
    ),
    # Coupons
    ToolDescriptor(
        name="fcart_list_coupons",
        description="List FluentCart coupons.",
        input_model=ListCouponsInput,
        error_context="listing coupons",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcart_create_coupon",
        description="Create a FluentCart coupon.",
        input_model=CreateCouponInput,
        error_context="creating coupon",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fcart_delete_coupon",
        description="Delete a FluentCart coupon.",
        input_model=CouponInput,
        error_context="deleting coupon",
        annotations=DESTRUCTIVE,
    ),
]

HANDLERS = {
    "fcart_list_products": rest_tool("GET", f"{NAMESPACE}/products"),
    "fcart_get_product": rest_tool("GET", f"{NAMESPACE}/products/{{product_id}}"),
    "fcart_create_product": rest_tool("POST", f"{NAMESPACE}/products"),
    "fcart_update_product": rest_tool("PUT", f"{NAMESPACE}/products/{{product_id}}"),
    "fcart_delete_product": rest_tool("DELETE", f"{NAMESPACE}/products/{{product_id}}"),
    "fcart_list_orders": rest_tool("GET", f"{NAMESPACE}/orders"),
    "fcart_get_order": rest_tool("GET", f"{NAMESPACE}/orders/{{order_id}}"),
    "fcart_create_order": rest_tool("POST", f"{NAMESPACE}/orders"),
    "fcart_update_order": rest_tool("PUT", f"{NAMESPACE}/orders/{{order_id}}"),
    "fcart_list_customers": rest_tool("GET", f"{NAMESPACE}/customers"),
    "fcart_get_customer": rest_tool("GET", f"{NAMESPACE}/customers/{{customer_id}}"),
    "fcart_create_customer": rest_tool("POST", f"{NAMESPACE}/customers"),
    "fcart_list_coupons": rest_tool("GET", f"{NAMESPACE}/coupons"),
    "fcart_create_coupon": rest_tool("POST", f"{NAMESPACE}/coupons"),
    "fcart_delete_coupon": rest_tool("DELETE", f"{NAMESPACE}/coupons/{{coupon_id}}"),
}
