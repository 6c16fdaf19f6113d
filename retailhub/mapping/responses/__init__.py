"""Entity -> API response mappers."""

from .base import ResponseMapper, isoformat, response_id
from .catalog import (
    MasterProductResponseMapper,
    ProductCategoryResponseMapper,
    ProductDailyStockResponseMapper,
    ProductResponseMapper,
    ProductStockInResponseMapper,
)
from .finance import (
    AccountCategoryResponseMapper,
    AccountResponseMapper,
    AccountTypeResponseMapper,
    FinanceReportResponseMapper,
    TransactionResponseMapper,
)
from .identity import RoleResponseMapper
from .sales import OrderResponseMapper

__all__ = [
    "AccountCategoryResponseMapper",
    "AccountResponseMapper",
    "AccountTypeResponseMapper",
    "FinanceReportResponseMapper",
    "MasterProductResponseMapper",
    "OrderResponseMapper",
    "ProductCategoryResponseMapper",
    "ProductDailyStockResponseMapper",
    "ProductResponseMapper",
    "ProductStockInResponseMapper",
    "ResponseMapper",
    "RoleResponseMapper",
    "TransactionResponseMapper",
    "isoformat",
    "response_id",
]
