"""Identity context schemas."""

from retailhub.infrastructure.identity.schemas.role_schemas import RoleCreate, RoleUpdate

__all__ = ["RoleCreate", "RoleUpdate"]
