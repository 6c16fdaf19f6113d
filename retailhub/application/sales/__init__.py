"""Sales application services."""

from retailhub.application.sales.order_service import OrderLine, OrderService

__all__ = ["OrderLine", "OrderService"]
