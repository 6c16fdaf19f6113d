"""Pydantic schemas for catalog API request validation."""

from pydantic import BaseModel, Field


class ProductCategoryCreate(BaseModel):
    """Schema for creating a product category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    is_active: bool = Field(True, description="Whether the category is active")


class ProductCategoryUpdate(BaseModel):
    """Schema for updating a product category."""

    name: str | None = Field(None, min_length=1, max_length=100)
    is_active: bool | None = None


class MasterProductCreate(BaseModel):
    """Schema for creating a master product."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category_id: int | None = Field(None, description="Optional category ID")
    is_active: bool = True


class MasterProductUpdate(BaseModel):
    """Schema for updating a master product."""

    name: str | None = Field(None, min_length=1, max_length=255)
    category_id: int | None = None
    is_active: bool | None = None


class ProductCreate(BaseModel):
    """Schema for creating a sellable product."""

    master_product_id: int = Field(..., description="Master product this product belongs to")
    description: str | None = None
    image_path: str | None = Field(None, max_length=500)
    price: float = Field(..., ge=0, description="Selling price")
    hpp: float | None = Field(None, ge=0, description="Cost of goods")
    is_active: bool = True


class ProductUpdate(BaseModel):
    """Schema for updating a product."""

    master_product_id: int | None = None
    description: str | None = None
    image_path: str | None = Field(None, max_length=500)
    price: float | None = Field(None, ge=0)
    hpp: float | None = Field(None, ge=0)
    is_active: bool | None = None


class ProductStockInRequest(BaseModel):
    """Schema for recording produced stock."""

    product_id: int = Field(..., description="Product receiving the stock")
    quantity: float = Field(..., gt=0, description="Quantity produced")
    unit_quantity: str = Field(..., min_length=1, max_length=50, description="Unit, e.g. pcs")
