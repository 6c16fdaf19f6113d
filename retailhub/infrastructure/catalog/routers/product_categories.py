import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.catalog.schemas import ProductCategoryCreate, ProductCategoryUpdate
from retailhub.infrastructure.common.routers import register_crud_routes

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/product-categories", tags=["product-categories"])

register_crud_routes(
    router,
    container.product_category_controller,
    create_schema=ProductCategoryCreate,
    update_schema=ProductCategoryUpdate,
)
