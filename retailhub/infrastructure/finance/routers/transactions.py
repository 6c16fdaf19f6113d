import logging
from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from retailhub.application.finance.transaction_service import TransactionService
from retailhub.core import container
from retailhub.exceptions import RetailhubError
from retailhub.infrastructure.common.di import inject_provider
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.common.schemas import ApiResponse
from retailhub.infrastructure.finance.schemas import TransactionCreate, TransactionUpdate
from retailhub.mapping.responses import FinanceReportResponseMapper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/report", status_code=status.HTTP_200_OK)
def get_finance_report(
    start_date: date,
    end_date: date,
    account_category_ids: Annotated[
        str | None,
        Query(pattern=r"^\d+(,\d+)*$", description="Comma-separated account category IDs"),
    ] = None,
    service: TransactionService = Depends(inject_provider(container.transaction_service)),
    mapper: FinanceReportResponseMapper = Depends(
        inject_provider(container.finance_report_response_mapper)
    ),
) -> ApiResponse[dict[str, Any]]:
    """
    Income and expense per day over an inclusive date range.

    Args:
        start_date: First day of the period
        end_date: Last day of the period
        account_category_ids: Restrict to accounts in these categories, e.g. "1,2"

    Returns:
        Period, summary totals and per-day transaction lines
    """
    try:
        category_ids = (
            [int(value) for value in account_category_ids.split(",")]
            if account_category_ids
            else None
        )
        report = service.generate_report(start_date, end_date, category_ids)
        return ApiResponse.success(
            mapper.to_response(report), message="Data retrieved successfully"
        )
    except RetailhubError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to generate finance report: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


register_crud_routes(
    router,
    container.transaction_controller,
    create_schema=TransactionCreate,
    update_schema=TransactionUpdate,
)
