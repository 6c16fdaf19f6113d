import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from retailhub.application.sales.order_service import OrderService
from retailhub.core import container
from retailhub.exceptions import RetailhubError
from retailhub.infrastructure.common.di import inject_provider
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.common.schemas import ApiResponse
from retailhub.infrastructure.sales.schemas import OrderCreate
from retailhub.mapping.responses import OrderResponseMapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

register_crud_routes(router, container.order_controller, operations={"list", "get"})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    request: OrderCreate,
    service: OrderService = Depends(inject_provider(container.order_service)),
    mapper: OrderResponseMapper = Depends(inject_provider(container.order_response_mapper)),
) -> ApiResponse[dict[str, Any]]:
    """
    Place an order.

    Prices come from the product table. Every product must be active and
    have enough stock; otherwise nothing is written.

    Args:
        request: Payment method and ordered items

    Returns:
        The created order with its items
    """
    try:
        order = service.create_order(
            request.payment_method,
            [(item.product_id, item.quantity) for item in request.items],
        )
        return ApiResponse.success(
            mapper.to_response(order), message="Data created successfully"
        )
    except RetailhubError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to create order: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
