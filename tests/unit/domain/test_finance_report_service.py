"""Tests for FinanceReportService."""

from datetime import date, datetime

from retailhub.domain.finance.finance_report_service import (
    FinanceReportService,
    TransactionType,
    balance_delta,
)


def _transaction(amount: float, transaction_type: str, moment: datetime) -> dict:
    return {
        "accountId": 1,
        "amount": amount,
        "transactionType": transaction_type,
        "transactionDate": moment,
        "description": "",
        "account": {"id": "1", "name": "Cash", "number": "1-100"},
    }


def test_balance_delta() -> None:
    assert balance_delta(TransactionType.INCOME, 50) == 50
    assert balance_delta(TransactionType.EXPENSE, 50) == -50


def test_groups_by_day_and_totals() -> None:
    transactions = [
        _transaction(30, "EXPENSE", datetime(2024, 1, 3, 12)),
        _transaction(100, "INCOME", datetime(2024, 1, 2, 9)),
        _transaction(20, "INCOME", datetime(2024, 1, 3, 8)),
    ]

    report = FinanceReportService.build_report(
        transactions, date(2024, 1, 1), date(2024, 1, 31)
    )

    assert [day.date for day in report.days] == [date(2024, 1, 2), date(2024, 1, 3)]
    assert report.days[1].total_income == 20
    assert report.days[1].total_expense == 30
    assert report.total_income == 120
    assert report.total_expense == 30
    assert report.balance == 90

    line = report.days[0].transactions[0]
    assert line.account_name == "Cash"
    assert line.description is None
    assert line.income_amount == 100
    assert line.expense_amount == 0


def test_empty_period() -> None:
    report = FinanceReportService.build_report([], date(2024, 1, 1), date(2024, 1, 1))

    assert report.days == []
    assert report.balance == 0
