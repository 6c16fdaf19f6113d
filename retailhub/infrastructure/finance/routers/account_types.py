import logging

from fastapi import APIRouter

from retailhub.core import container
from retailhub.infrastructure.common.routers import register_crud_routes

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/account-types", tags=["account-types"])

# Account types are reference data: list and detail only
register_crud_routes(router, container.account_type_controller, operations={"list", "get"})
