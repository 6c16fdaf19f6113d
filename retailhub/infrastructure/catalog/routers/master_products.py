import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.catalog.schemas import MasterProductCreate, MasterProductUpdate
from retailhub.infrastructure.common.routers import register_crud_routes

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/master-products", tags=["master-products"])

register_crud_routes(
    router,
    container.master_product_controller,
    create_schema=MasterProductCreate,
    update_schema=MasterProductUpdate,
)
