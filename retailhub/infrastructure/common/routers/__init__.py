"""Shared router building blocks."""

from retailhub.infrastructure.common.routers.crud import register_crud_routes

__all__ = ["register_crud_routes"]
