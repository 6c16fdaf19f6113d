"""FastAPI application factory and ASGI entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from retailhub.config import configure_logging, get_settings
from retailhub.database import dispose_engine, initialize_database
from retailhub.infrastructure.catalog.routers import master_products, product_categories, products
from retailhub.infrastructure.common.error_handlers import register_exception_handlers
from retailhub.infrastructure.finance.routers import (
    account_categories,
    account_types,
    accounts,
    transactions,
)
from retailhub.infrastructure.identity.routers import roles
from retailhub.infrastructure.sales.routers import orders

logger = logging.getLogger(__name__)

api_router = APIRouter()
api_router.include_router(product_categories.router)
api_router.include_router(master_products.router)
api_router.include_router(products.router)
api_router.include_router(roles.router)
api_router.include_router(account_categories.router)
api_router.include_router(account_types.router)
api_router.include_router(accounts.router)
api_router.include_router(transactions.router)
api_router.include_router(orders.router)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging and the database engine; dispose the engine on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(f"Starting {settings.PROJECT_NAME} in {settings.ENVIRONMENT} mode")

    yield

    logger.info("Shutting down application")
    dispose_engine()


def create_app() -> FastAPI:
    """Build the application with middleware, exception handlers and routes."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Retail back-office API: catalog, stock, orders and bookkeeping",
        docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "version": settings.VERSION}

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


# Entry point for uvicorn
app = create_app()
