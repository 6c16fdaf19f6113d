"""Sales context schemas."""

from retailhub.infrastructure.sales.schemas.order_schemas import OrderCreate, OrderItemRequest

__all__ = ["OrderCreate", "OrderItemRequest"]
