"""Infrastructure layer repositories for the catalog bounded context."""

from retailhub.infrastructure.catalog.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
