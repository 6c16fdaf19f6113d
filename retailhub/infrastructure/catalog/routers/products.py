import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from retailhub.application.catalog.product_service import ProductService
from retailhub.core import container
from retailhub.exceptions import RetailhubError
from retailhub.infrastructure.catalog.schemas import (
    ProductCreate,
    ProductStockInRequest,
    ProductUpdate,
)
from retailhub.infrastructure.common.controller import paginated_response
from retailhub.infrastructure.common.di import inject_provider
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.common.schemas import ApiResponse, ListQueryParams
from retailhub.mapping.responses import (
    ProductDailyStockResponseMapper,
    ProductStockInResponseMapper,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.post("/in", status_code=status.HTTP_201_CREATED)
def add_stock_in(
    request: ProductStockInRequest,
    service: ProductService = Depends(inject_provider(container.product_service)),
    mapper: ProductStockInResponseMapper = Depends(
        inject_provider(container.product_stock_in_response_mapper)
    ),
) -> ApiResponse[dict[str, Any]]:
    """
    Record produced stock for a product.

    Args:
        request: Product, quantity and unit of the stock-in

    Returns:
        The movement with the product's stock after it
    """
    try:
        result = service.add_stock_in(request.product_id, request.quantity, request.unit_quantity)
        return ApiResponse.success(mapper.to_response(result), message="Data created successfully")
    except RetailhubError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to add stock for product {request.product_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/stock", status_code=status.HTTP_200_OK)
def get_stocks(
    query: ListQueryParams,
    service: ProductService = Depends(inject_provider(container.product_service)),
    mapper: ProductDailyStockResponseMapper = Depends(
        inject_provider(container.product_daily_stock_response_mapper)
    ),
) -> ApiResponse[list[dict[str, Any]]]:
    """
    Daily stock ledger, one row per product and day with movements.

    Rows are ordered by product then day. Only page and limit apply.
    """
    try:
        result = service.get_stocks_list(query.pagination)
        return paginated_response(result, mapper)
    except RetailhubError:
        raise
    except Exception as e:
        logger.error(f"Failed to build stock ledger: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


register_crud_routes(
    router,
    container.product_controller,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
)
