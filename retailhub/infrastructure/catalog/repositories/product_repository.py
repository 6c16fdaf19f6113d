"""Repository for products and their stock movements."""

import structlog
from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from retailhub.domain.catalog.stock_ledger_service import MovementType, StockSource
from retailhub.infrastructure.common.records import build_include_tree, load_options, to_record
from retailhub.infrastructure.common.repository import Repository
from retailhub.mapping.entity_mapper import Entity, EntityMapper
from retailhub.models import Product as ProductORM
from retailhub.models import ProductStock as ProductStockORM

logger = structlog.get_logger(__name__)

DEFAULT_UNIT = "pcs"

# +quantity for IN movements, -quantity otherwise
SIGNED_QUANTITY = case(
    (ProductStockORM.movement_type == MovementType.IN.value, ProductStockORM.quantity),
    else_=-ProductStockORM.quantity,
)


class ProductRepository(Repository):
    """Products plus the stock movement ledger behind them."""

    def __init__(self, db: Session) -> None:
        super().__init__(db, "product", ProductORM)
        self.stock_mapper = EntityMapper.for_resource("product_stock")
        self._stock_tree = build_include_tree(self.stock_mapper.includes())

    def add_stock_movement(
        self,
        product_id: int,
        quantity: float,
        unit_quantity: str,
        movement_type: MovementType,
        source: StockSource,
    ) -> Entity:
        """Record one stock movement and return it as an entity."""
        movement = ProductStockORM(
            product_id=product_id,
            quantity=quantity,
            unit_quantity=unit_quantity,
            movement_type=movement_type.value,
            source=source.value,
        )
        with self.atomic():
            self.db.add(movement)
            self.db.flush()
            movement_id = movement.id

        logger.info(
            "stock_movement_recorded",
            product_id=product_id,
            movement_type=movement_type.value,
            quantity=quantity,
        )

        stmt = (
            select(ProductStockORM)
            .where(ProductStockORM.id == movement_id)
            .options(*load_options(ProductStockORM, self._stock_tree))
            .execution_options(populate_existing=True)
        )
        instance = self.db.execute(stmt).scalar_one()
        return self.stock_mapper.map_to_entity(to_record(instance, self._stock_tree))

    def current_stock(self, product_id: int) -> float:
        """Sum of IN minus sum of OUT quantities for one product."""
        stmt = select(func.coalesce(func.sum(SIGNED_QUANTITY), 0)).where(
            ProductStockORM.product_id == product_id
        )
        return float(self.db.execute(stmt).scalar_one())

    def stock_unit(self, product_id: int) -> str:
        """Unit of the product's most recent movement."""
        stmt = (
            select(ProductStockORM.unit_quantity)
            .where(ProductStockORM.product_id == product_id)
            .order_by(ProductStockORM.created_at.desc(), ProductStockORM.id.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none() or DEFAULT_UNIT

    def get_all_stock_movements(self) -> list[Entity]:
        """Every stock movement, oldest first, with product names loaded."""
        stmt = (
            select(ProductStockORM)
            .options(*load_options(ProductStockORM, self._stock_tree))
            .order_by(ProductStockORM.created_at, ProductStockORM.id)
            .execution_options(populate_existing=True)
        )
        instances = self.db.execute(stmt).scalars().all()
        return [
            self.stock_mapper.map_to_entity(to_record(instance, self._stock_tree))
            for instance in instances
        ]
