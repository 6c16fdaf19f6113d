"""Pydantic schemas for role API request validation."""

from pydantic import BaseModel, Field


class RoleCreate(BaseModel):
    """Schema for creating a role."""

    name: str = Field(..., min_length=1, max_length=50, description="Unique role name")
    description: str | None = Field(None, max_length=255)
    is_active: bool = True


class RoleUpdate(BaseModel):
    """Schema for updating a role."""

    name: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = Field(None, max_length=255)
    is_active: bool | None = None
