"""Infrastructure layer repositories for the finance bounded context."""

from retailhub.infrastructure.finance.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["TransactionRepository"]
