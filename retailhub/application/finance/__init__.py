"""Finance application services."""

from retailhub.application.finance.account_service import AccountService
from retailhub.application.finance.account_type_service import AccountTypeService
from retailhub.application.finance.transaction_service import TransactionService

__all__ = ["AccountService", "AccountTypeService", "TransactionService"]
