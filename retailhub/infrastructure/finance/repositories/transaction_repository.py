"""Repository for transactions, keeping account balances in step."""

from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

import structlog
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from retailhub.domain.finance.finance_report_service import balance_delta
from retailhub.exceptions import NotFoundError
from retailhub.infrastructure.common.repository import Repository
from retailhub.mapping.entity_mapper import Entity
from retailhub.mapping.mapper_util import parse_int_id
from retailhub.models import Account as AccountORM
from retailhub.models import Transaction as TransactionORM

logger = structlog.get_logger(__name__)


class TransactionRepository(Repository):
    """
    Transactions CRUD where every write also moves the account balance.

    The row change and the balance adjustment commit in the same database
    transaction.
    """

    def __init__(self, db: Session) -> None:
        super().__init__(db, "transaction", TransactionORM)

    def _adjust_balance(self, account_id: int, delta: float) -> None:
        self.db.execute(
            update(AccountORM)
            .where(AccountORM.id == account_id)
            .values(balance=AccountORM.balance + delta)
        )

    def _get_instance(self, id: str) -> TransactionORM:
        instance = self.db.get(TransactionORM, parse_int_id(id))
        if instance is None:
            raise NotFoundError(self.label, id)
        return instance

    def record(self, data: Mapping[str, Any]) -> Entity:
        """Create a transaction and apply it to its account's balance."""
        instance = TransactionORM(**self._writable(data))
        with self.atomic():
            self.db.add(instance)
            self.db.flush()
            self._adjust_balance(
                instance.account_id, balance_delta(instance.transaction_type, instance.amount)
            )
            new_id = instance.id

        logger.info(
            "transaction_recorded",
            transaction_id=new_id,
            account_id=instance.account_id,
            amount=instance.amount,
            transaction_type=instance.transaction_type,
        )
        return self._require(new_id)

    def revise(self, id: str, data: Mapping[str, Any]) -> Entity:
        """Update a transaction: reverse its old effect, then apply the new one."""
        instance = self._get_instance(id)
        with self.atomic():
            self._adjust_balance(
                instance.account_id, -balance_delta(instance.transaction_type, instance.amount)
            )
            for key, value in self._writable(data).items():
                setattr(instance, key, value)
            self.db.flush()
            self._adjust_balance(
                instance.account_id, balance_delta(instance.transaction_type, instance.amount)
            )
            transaction_id = instance.id

        logger.info("transaction_revised", transaction_id=transaction_id)
        return self._require(transaction_id)

    def remove(self, id: str) -> None:
        """Delete a transaction and reverse its effect on the balance."""
        instance = self._get_instance(id)
        with self.atomic():
            self._adjust_balance(
                instance.account_id, -balance_delta(instance.transaction_type, instance.amount)
            )
            self.db.delete(instance)

        logger.info("transaction_removed", transaction_id=parse_int_id(id))

    def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
        account_category_ids: list[int] | None = None,
    ) -> list[Entity]:
        """
        Transactions dated within [start_date, end_date], both days inclusive.

        Args:
            start_date: First day
            end_date: Last day
            account_category_ids: Restrict to accounts in these categories

        Returns:
            Transaction entities ordered by date
        """
        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date + timedelta(days=1), time.min)

        stmt = self._select().where(
            TransactionORM.transaction_date >= start,
            TransactionORM.transaction_date < end,
        )
        if account_category_ids:
            stmt = stmt.where(
                TransactionORM.account_id.in_(
                    select(AccountORM.id).where(
                        AccountORM.account_category_id.in_(account_category_ids)
                    )
                )
            )
        stmt = stmt.order_by(TransactionORM.transaction_date, TransactionORM.id)

        instances = self.db.execute(stmt).scalars().all()
        return [self._to_entity(instance) for instance in instances]
