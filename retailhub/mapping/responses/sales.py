from typing import Any

from retailhub.mapping.responses.base import (
    Response,
    ResponseMapper,
    is_active,
    isoformat,
    response_id,
)


class OrderResponseMapper(ResponseMapper):
    """Order -> response. Listings leave out the items."""

    def to_response(self, entity: dict[str, Any]) -> Response:
        response = self.to_list_response(entity)
        response["items"] = [
            {
                "id": response_id(item["id"]),
                "product_id": item.get("productId"),
                "product_name": item.get("productName"),
                "quantity": item.get("quantity"),
                "price": item.get("price"),
                "total_price": item.get("price", 0) * item.get("quantity", 0),
            }
            for item in entity.get("items") or []
        ]
        return response

    def to_list_response(self, entity: dict[str, Any]) -> Response:
        return {
            "id": response_id(entity["id"]),
            "invoice_number": entity.get("invoiceNumber"),
            "payment_method": entity.get("paymentMethod"),
            "total_amount": entity.get("totalAmount"),
            "status": entity.get("status"),
            "items": [],
            "is_active": is_active(entity),
            "created_at": isoformat(entity.get("createdAt")),
            "updated_at": isoformat(entity.get("updatedAt")),
        }
