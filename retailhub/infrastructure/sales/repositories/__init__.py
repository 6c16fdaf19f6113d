"""Infrastructure layer repositories for the sales bounded context."""

from retailhub.infrastructure.sales.repositories.order_repository import OrderRepository

__all__ = ["OrderRepository"]
