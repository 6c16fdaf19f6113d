"""Finance context schemas."""

from retailhub.infrastructure.finance.schemas.finance_schemas import (
    AccountCategoryCreate,
    AccountCategoryUpdate,
    AccountCreate,
    AccountUpdate,
    TransactionCreate,
    TransactionUpdate,
)

__all__ = [
    "AccountCategoryCreate",
    "AccountCategoryUpdate",
    "AccountCreate",
    "AccountUpdate",
    "TransactionCreate",
    "TransactionUpdate",
]
