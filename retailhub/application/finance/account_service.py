"""Account service."""

from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from retailhub.application.common.service import (
    Entity,
    ReferenceRepositoryProtocol,
    RepositoryProtocol,
    Service,
    require_reference,
)
from retailhub.exceptions import AccountInUseError, DuplicateAccountNumberError

logger = structlog.get_logger(__name__)


class AccountRepositoryProtocol(RepositoryProtocol, Protocol):
    def find_one_by(self, **filters: Any) -> Entity | None: ...  # noqa: ANN401


class AccountService(Service):
    """
    Accounts have unique numbers and belong to an existing category and
    account type.

    New accounts start with a zero balance unless one is given and are
    active by default. An account that has transactions cannot be deleted.
    """

    repository: AccountRepositoryProtocol

    def __init__(
        self,
        repository: AccountRepositoryProtocol,
        account_category_repository: ReferenceRepositoryProtocol,
        account_type_repository: ReferenceRepositoryProtocol,
    ) -> None:
        super().__init__(repository)
        self.account_category_repository = account_category_repository
        self.account_type_repository = account_type_repository

    def _check_references(self, data: Mapping[str, Any]) -> None:
        require_reference(
            self.account_category_repository,
            data.get("account_category_id"),
            "account_category_id",
        )
        require_reference(
            self.account_type_repository, data.get("account_type_id"), "account_type_id"
        )

    def _ensure_number_available(self, number: str | None, account_id: str | None = None) -> None:
        if number is None:
            return
        existing = self.repository.find_one_by(number=number)
        if existing is not None and existing["id"] != account_id:
            raise DuplicateAccountNumberError(number)

    def create(self, data: Mapping[str, Any]) -> Entity:
        self._ensure_number_available(data.get("number"))
        self._check_references(data)

        values = dict(data)
        if values.get("balance") is None:
            values["balance"] = 0
        if values.get("is_active") is None:
            values["is_active"] = True

        account = self.repository.create(values)
        logger.info("account_created", account_id=account["id"], number=account["number"])
        return account

    def update(self, id: str, data: Mapping[str, Any]) -> Entity:
        account = self.find_by_id(id)
        self._ensure_number_available(data.get("number"), account_id=account["id"])
        self._check_references(data)
        return self.repository.update(id, data)

    def delete(self, id: str) -> None:
        account = self.find_by_id(id)
        transaction_count = int(account.get("transactionCount") or 0)
        if transaction_count > 0:
            raise AccountInUseError(id, transaction_count)
        self.repository.delete(id)
