"""Product service: CRUD plus stock-in and the daily stock ledger."""

from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from retailhub.application.common.pagination import PaginatedResult, Pagination
from retailhub.application.common.service import (
    Entity,
    ReferenceRepositoryProtocol,
    RepositoryProtocol,
    Service,
    require_reference,
)
from retailhub.domain.catalog.stock_ledger_service import (
    MovementType,
    StockLedgerService,
    StockSource,
)
from retailhub.exceptions import NotFoundError
from retailhub.mapping.mapper_util import parse_int_id

logger = structlog.get_logger(__name__)


class ProductRepositoryProtocol(RepositoryProtocol, Protocol):
    def add_stock_movement(
        self,
        product_id: int,
        quantity: float,
        unit_quantity: str,
        movement_type: MovementType,
        source: StockSource,
    ) -> Entity: ...

    def current_stock(self, product_id: int) -> float: ...

    def get_all_stock_movements(self) -> list[Entity]: ...


class ProductService(Service):
    """Products must belong to an existing master product."""

    repository: ProductRepositoryProtocol

    def __init__(
        self,
        repository: ProductRepositoryProtocol,
        master_product_repository: ReferenceRepositoryProtocol,
    ) -> None:
        super().__init__(repository)
        self.master_product_repository = master_product_repository

    def create(self, data: Mapping[str, Any]) -> Entity:
        require_reference(
            self.master_product_repository, data.get("master_product_id"), "master_product_id"
        )
        return super().create(data)

    def update(self, id: str, data: Mapping[str, Any]) -> Entity:
        require_reference(
            self.master_product_repository, data.get("master_product_id"), "master_product_id"
        )
        return super().update(id, data)

    def add_stock_in(self, product_id: int | str, quantity: float, unit_quantity: str) -> Entity:
        """
        Record a PRODUCTION stock-in for a product.

        Args:
            product_id: Product receiving the stock
            quantity: Quantity produced
            unit_quantity: Unit the quantity is expressed in

        Returns:
            Stock-in result with the product's stock after the movement

        Raises:
            NotFoundError: If the product does not exist
        """
        numeric_id = parse_int_id(product_id, field="product_id")
        product = self.repository.get_by_id(str(numeric_id))
        if product is None:
            raise NotFoundError(self.repository.label, numeric_id, field="product_id")

        movement = self.repository.add_stock_movement(
            numeric_id, quantity, unit_quantity, MovementType.IN, StockSource.PRODUCTION
        )
        current_stock = self.repository.current_stock(numeric_id)

        logger.info(
            "product_stock_in",
            product_id=numeric_id,
            quantity=quantity,
            current_stock=current_stock,
        )

        master = product.get("productMaster") or {}
        return {
            "productId": product["id"],
            "productName": master.get("name"),
            "quantity": movement["quantity"],
            "unitQuantity": movement["unitQuantity"],
            "currentStock": current_stock,
            "createdAt": movement["createdAt"],
        }

    def get_stocks_list(self, pagination: Pagination) -> PaginatedResult[Entity]:
        """Daily stock ledger over every movement, paginated in memory."""
        rows = StockLedgerService.build_daily_ledger(self.repository.get_all_stock_movements())
        return PaginatedResult(data=pagination.slice(rows), total=len(rows), pagination=pagination)
