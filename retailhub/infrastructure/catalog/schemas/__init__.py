"""Catalog context schemas."""

from retailhub.infrastructure.catalog.schemas.catalog_schemas import (
    MasterProductCreate,
    MasterProductUpdate,
    ProductCategoryCreate,
    ProductCategoryUpdate,
    ProductCreate,
    ProductStockInRequest,
    ProductUpdate,
)

__all__ = [
    "MasterProductCreate",
    "MasterProductUpdate",
    "ProductCategoryCreate",
    "ProductCategoryUpdate",
    "ProductCreate",
    "ProductStockInRequest",
    "ProductUpdate",
]
