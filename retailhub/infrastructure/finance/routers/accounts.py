import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.finance.schemas import AccountCreate, AccountUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/accounts", tags=["accounts"])

register_crud_routes(
    router,
    container.account_controller,
    create_schema=AccountCreate,
    update_schema=AccountUpdate,
)
