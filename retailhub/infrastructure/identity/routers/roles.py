import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.common.routers import register_crud_routes
from retailhub.infrastructure.identity.schemas import RoleCreate, RoleUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/roles", tags=["roles"])

register_crud_routes(
    router, container.role_controller, create_schema=RoleCreate, update_schema=RoleUpdate
)
