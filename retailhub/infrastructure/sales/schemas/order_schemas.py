"""Pydantic schemas for order API request validation."""

from pydantic import BaseModel, Field


class OrderItemRequest(BaseModel):
    """One product line of an order."""

    product_id: int
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    """Schema for placing an order; prices come from the product table."""

    payment_method: str = Field(..., min_length=1, max_length=30, description="e.g. CASH, QRIS")
    items: list[OrderItemRequest] = Field(..., min_length=1)
