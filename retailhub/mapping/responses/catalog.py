"""Response mappers for categories, master products, products and stock."""

from typing import Any

from retailhub.mapping.responses.base import (
    Response,
    ResponseMapper,
    is_active,
    isoformat,
    response_id,
)


def _category_response(category: dict[str, Any] | None) -> Response | None:
    if category is None:
        return None
    return {
        "id": response_id(category["id"]),
        "name": category.get("name"),
        "is_active": is_active(category),
    }


class ProductCategoryResponseMapper(ResponseMapper):
    """Product category -> response."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class MasterProductResponseMapper(ResponseMapper):
    """Master product -> response; a missing category renders as null."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["id"]),
            "name": entity.get("name"),
            "category_id": entity.get("categoryId"),
            "category": _category_response(entity.get("category")),
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class ProductResponseMapper(ResponseMapper):
    """Product -> response, flattening the master product's name and category."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        master = entity.get("productMaster")
        return {
            "id": response_id(entity["id"]),
            "master_product_id": entity.get("masterProductId"),
            "name": master["name"] if master else None,
            "description": entity.get("description"),
            "image_path": entity.get("imagePath"),
            "price": entity.get("price"),
            "hpp": entity.get("hpp"),
            "category": _category_response(master["category"] if master else None),
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }


class ProductStockInResponseMapper(ResponseMapper):
    """Stock-in result -> response."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["productId"]),
            "item_type": "PRODUCT",
            "item_name": entity.get("productName"),
            "quantity": entity.get("quantity"),
            "unit_quantity": entity.get("unitQuantity"),
            "current_stock": entity.get("currentStock"),
            "created_at": isoformat(entity.get("createdAt")),
        }


class ProductDailyStockResponseMapper(ResponseMapper):
    """One (product, day) row of the stock ledger -> response."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["productId"]),
            "date": isoformat(entity.get("date")),
            "name": entity.get("name"),
            "first_stock_count": entity.get("firstStockCount"),
            "stock_in_count": entity.get("stockInCount"),
            "stock_out_count": entity.get("stockOutCount"),
            "current_stock": entity.get("currentStock"),
            "unit_quantity": entity.get("unitQuantity"),
            "updated_at": isoformat(entity.get("updatedAt")),
            "in_times": entity.get("inTimes"),
            "out_times": entity.get("outTimes"),
        }
