"""Response mappers for account categories, accounts, transactions and the report."""

from typing import Any

from retailhub.domain.finance.finance_report_service import FinanceReport
from retailhub.mapping.responses.base import (
    Response,
    ResponseMapper,
    is_active,
    isoformat,
    response_id,
)


class AccountCategoryResponseMapper(ResponseMapper):
    """Account category -> response."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "description": entity.get("description") or None,
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class AccountTypeResponseMapper(ResponseMapper):
    """Account type -> response, with its category."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        category = entity.get("accountCategory")
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "description": entity.get("description") or None,
            "account_category_id": entity.get("accountCategoryId"),
            "account_category": {
                "id": response_id(category["id"]),
                "name": category.get("name"),
                "description": category.get("description") or None,
            }
            if category
            else None,
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class AccountResponseMapper(ResponseMapper):
    """Account -> response, with its category, type and transaction count."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        category = entity.get("accountCategory")
        account_type = entity.get("accountType")
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "number": entity.get("number"),
            "balance": entity.get("balance"),
            "description": entity.get("description") or None,
            "account_category_id": entity.get("accountCategoryId"),
            "account_category": {
                "id": response_id(category["id"]),
                "name": category.get("name"),
                "description": category.get("description") or None,
            }
            if category
            else None,
            "account_type_id": entity.get("accountTypeId"),
            "account_type": {
                "id": response_id(account_type["id"]),
                "name": account_type.get("name"),
                "description": account_type.get("description") or None,
            }
            if account_type
            else None,
            "transaction_count": int(entity.get("transactionCount") or 0),
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class TransactionResponseMapper(ResponseMapper):
    """Transaction -> response."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        account = entity.get("account")
        return {
            "id": response_id(entity["id"]),
            "account_id": entity.get("accountId"),
            "account": {
                "id": response_id(account["id"]),
                "name": account.get("name"),
                "number": account.get("number"),
            }
            if account
            else None,
            "amount": entity.get("amount"),
            "transaction_type": entity.get("transactionType"),
            "description": entity.get("description") or None,
            "transaction_date": isoformat(entity.get("transactionDate")),
            "reference_number": entity.get("referenceNumber") or None,
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class FinanceReportResponseMapper:
    """Finance report -> response."""

    def to_response(self, report: FinanceReport) -> Response:
        return {
            "period": {
                "start_date": isoformat(report.start_date),
                "end_date": isoformat(report.end_date),
            },
            "summary": {
                "total_income": report.total_income,
                "total_expense": report.total_expense,
                "balance": report.balance,
            },
            "data": [
                {
                    "date": isoformat(day.date),
                    "transactions": [
                        {
                            "account_id": line.account_id,
                            "account_name": line.account_name,
                            "account_number": line.account_number,
                            "description": line.description,
                            "income_amount": line.income_amount,
                            "expense_amount": line.expense_amount,
                        }
                        for line in day.transactions
                    ],
                    "total_income": day.total_income,
                    "total_expense": day.total_expense,
                }
                for day in report.days
            ],
        }
