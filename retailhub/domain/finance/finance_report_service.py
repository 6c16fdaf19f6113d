"""Domain logic for account balances and the daily finance report."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any


class TransactionType(StrEnum):
    """INCOME credits an account, EXPENSE debits it."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


def balance_delta(transaction_type: str, amount: float) -> float:
    """Signed effect of a transaction on its account's balance."""
    return amount if transaction_type == TransactionType.INCOME else -amount


@dataclass
class ReportLine:
    """A single transaction as it appears in the report."""

    account_id: int
    account_name: str
    account_number: str
    description: str | None
    income_amount: float
    expense_amount: float


@dataclass
class ReportDay:
    """Transactions of one calendar day with their totals."""

    date: date
    transactions: list[ReportLine] = field(default_factory=list)
    total_income: float = 0
    total_expense: float = 0


@dataclass
class FinanceReport:
    """Income/expense report over a date range."""

    start_date: date
    end_date: date
    days: list[ReportDay]

    @property
    def total_income(self) -> float:
        return sum(day.total_income for day in self.days)

    @property
    def total_expense(self) -> float:
        return sum(day.total_expense for day in self.days)

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expense


def _day_of(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


class FinanceReportService:
    """Stateless domain service grouping transactions into a report."""

    @staticmethod
    def build_report(
        transactions: Iterable[dict[str, Any]], start_date: date, end_date: date
    ) -> FinanceReport:
        """
        Group transactions by day, sorted by date.

        Args:
            transactions: Transaction entities with their account relation
            start_date: First day of the reported period
            end_date: Last day of the reported period

        Returns:
            The report with per-day and overall totals
        """
        grouped: dict[date, ReportDay] = {}

        for transaction in transactions:
            day = _day_of(transaction["transactionDate"])
            report_day = grouped.setdefault(day, ReportDay(date=day))

            is_income = transaction["transactionType"] == TransactionType.INCOME
            amount = transaction["amount"]
            account = transaction.get("account") or {}

            report_day.transactions.append(
                ReportLine(
                    account_id=int(transaction["accountId"]),
                    account_name=account.get("name") or "",
                    account_number=account.get("number") or "",
                    description=transaction.get("description") or None,
                    income_amount=amount if is_income else 0,
                    expense_amount=0 if is_income else amount,
                )
            )
            if is_income:
                report_day.total_income += amount
            else:
                report_day.total_expense += amount

        days = [grouped[day] for day in sorted(grouped)]
        return FinanceReport(start_date=start_date, end_date=end_date, days=days)
