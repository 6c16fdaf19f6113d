"""Pydantic schemas for finance API request validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from retailhub.domain.finance.finance_report_service import TransactionType


class AccountCategoryCreate(BaseModel):
    """Schema for creating an account category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: str | None = None
    is_active: bool = True


class AccountCategoryUpdate(BaseModel):
    """Schema for updating an account category."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    is_active: bool | None = None


class AccountCreate(BaseModel):
    """Schema for creating an account; balance defaults to 0."""

    name: str = Field(..., min_length=1, max_length=255)
    number: str = Field(..., min_length=1, max_length=50, description="Unique account number")
    balance: float | None = Field(None, description="Opening balance")
    description: str | None = None
    account_category_id: int = Field(..., description="Account category ID")
    account_type_id: int = Field(..., description="Account type ID")
    is_active: bool | None = None


class AccountUpdate(BaseModel):
    """Schema for updating an account."""

    name: str | None = Field(None, min_length=1, max_length=255)
    number: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    account_category_id: int | None = None
    account_type_id: int | None = None
    is_active: bool | None = None


class TransactionCreate(BaseModel):
    """Schema for booking a transaction."""

    account_id: int = Field(..., description="Account the transaction is booked on")
    amount: float = Field(..., gt=0, description="Positive amount")
    transaction_type: TransactionType
    description: str | None = None
    transaction_date: datetime
    reference_number: str | None = Field(None, max_length=100)


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction."""

    account_id: int | None = None
    amount: float | None = Field(None, gt=0)
    transaction_type: TransactionType | None = None
    description: str | None = None
    transaction_date: datetime | None = None
    reference_number: str | None = Field(None, max_length=100)
