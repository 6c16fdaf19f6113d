"""Transaction service: balance-aware CRUD and the finance report."""

from collections.abc import Mapping
from datetime import date
from typing import Any, Protocol

import structlog

from retailhub.application.common.service import (
    Entity,
    ReferenceRepositoryProtocol,
    RepositoryProtocol,
    Service,
    require_reference,
)
from retailhub.domain.finance.finance_report_service import FinanceReport, FinanceReportService
from retailhub.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class TransactionRepositoryProtocol(RepositoryProtocol, Protocol):
    def record(self, data: Mapping[str, Any]) -> Entity: ...

    def revise(self, id: str, data: Mapping[str, Any]) -> Entity: ...

    def remove(self, id: str) -> None: ...

    def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
        account_category_ids: list[int] | None = None,
    ) -> list[Entity]: ...


class TransactionService(Service):
    """Every write keeps the owning account's balance in step."""

    repository: TransactionRepositoryProtocol

    def __init__(
        self,
        repository: TransactionRepositoryProtocol,
        account_repository: ReferenceRepositoryProtocol,
    ) -> None:
        super().__init__(repository)
        self.account_repository = account_repository

    def create(self, data: Mapping[str, Any]) -> Entity:
        require_reference(self.account_repository, data.get("account_id"), "account_id")
        return self.repository.record(data)

    def update(self, id: str, data: Mapping[str, Any]) -> Entity:
        self.find_by_id(id)
        require_reference(self.account_repository, data.get("account_id"), "account_id")
        return self.repository.revise(id, data)

    def delete(self, id: str) -> None:
        self.find_by_id(id)
        self.repository.remove(id)

    def generate_report(
        self,
        start_date: date,
        end_date: date,
        account_category_ids: list[int] | None = None,
    ) -> FinanceReport:
        """
        Income/expense report grouped by day.

        Args:
            start_date: First day, inclusive
            end_date: Last day, inclusive
            account_category_ids: Only include accounts in these categories

        Returns:
            The finance report

        Raises:
            ValidationError: If start_date is after end_date
        """
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date", field="start_date")

        transactions = self.repository.find_by_date_range(
            start_date, end_date, account_category_ids
        )
        report = FinanceReportService.build_report(transactions, start_date, end_date)

        logger.info(
            "finance_report_generated",
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
            days=len(report.days),
        )
        return report
