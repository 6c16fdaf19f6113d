"""Domain service folding stock movements into a per-day stock ledger."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

NO_TIME = "00:00:00"


class MovementType(StrEnum):
    """Direction of a stock movement."""

    IN = "IN"
    OUT = "OUT"


class StockSource(StrEnum):
    """What caused a stock movement."""

    PRODUCTION = "PRODUCTION"
    ORDER = "ORDER"


@dataclass
class _DailyStock:
    product_id: int
    name: str
    day: date
    unit_quantity: str
    stock_in: float = 0
    stock_out: float = 0
    latest_in: datetime | None = None
    latest_out: datetime | None = None
    updated_at: datetime | None = None


def _format_time(moment: datetime | None) -> str:
    return moment.strftime("%H:%M:%S") if moment else NO_TIME


def _later(current: datetime | None, candidate: datetime) -> datetime:
    return candidate if current is None or candidate > current else current


class StockLedgerService:
    """Stateless domain service for product stock arithmetic."""

    @staticmethod
    def current_stock(movements: Iterable[dict[str, Any]]) -> float:
        """Sum of IN quantities minus sum of OUT quantities."""
        total: float = 0
        for movement in movements:
            if movement["movementType"] == MovementType.IN:
                total += movement["quantity"]
            else:
                total -= movement["quantity"]
        return total

    @staticmethod
    def build_daily_ledger(movements: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Fold stock movements into one row per (product, calendar day).

        Rows are sorted by product id, then date. Each row opens with the
        previous day's closing stock of the same product (0 for the first
        day) and closes at opening + in - out. Latest in/out times render as
        HH:MM:SS, "00:00:00" when there was no movement in that direction.

        Args:
            movements: Product stock entities with their product relation

        Returns:
            Ledger rows as camelCase entities
        """
        days: dict[tuple[int, date], _DailyStock] = {}

        for movement in movements:
            product_id = int(movement["productId"])
            created_at: datetime = movement["createdAt"]
            key = (product_id, created_at.date())

            daily = days.get(key)
            if daily is None:
                product = movement.get("product") or {}
                daily = _DailyStock(
                    product_id=product_id,
                    name=product.get("name") or "",
                    day=created_at.date(),
                    unit_quantity=movement["unitQuantity"],
                )
                days[key] = daily

            if movement["movementType"] == MovementType.IN:
                daily.stock_in += movement["quantity"]
                daily.latest_in = _later(daily.latest_in, created_at)
            else:
                daily.stock_out += movement["quantity"]
                daily.latest_out = _later(daily.latest_out, created_at)
            daily.updated_at = _later(daily.updated_at, created_at)

        running: dict[int, float] = {}
        rows: list[dict[str, Any]] = []

        for product_id, day in sorted(days):
            daily = days[(product_id, day)]
            opening = running.get(product_id, 0)
            closing = opening + daily.stock_in - daily.stock_out
            running[product_id] = closing

            rows.append(
                {
                    "productId": str(product_id),
                    "date": day,
                    "name": daily.name,
                    "firstStockCount": opening,
                    "stockInCount": daily.stock_in,
                    "stockOutCount": daily.stock_out,
                    "currentStock": closing,
                    "unitQuantity": daily.unit_quantity,
                    "updatedAt": daily.updated_at,
                    "inTimes": _format_time(daily.latest_in),
                    "outTimes": _format_time(daily.latest_out),
                }
            )

        return rows
