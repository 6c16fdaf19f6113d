import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.finance.schemas import AccountCategoryCreate, AccountCategoryUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/account-categories", tags=["account-categories"])

register_crud_routes(
    router,
    container.account_category_controller,
    create_schema=AccountCategoryCreate,
    update_schema=AccountCategoryUpdate,
)
