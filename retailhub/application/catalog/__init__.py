"""Catalog application services."""

from retailhub.application.catalog.master_product_service import MasterProductService
from retailhub.application.catalog.product_service import ProductService

__all__ = ["MasterProductService", "ProductService"]
