"""
Application common module.

Contains base classes for the application layer:
- Pagination / PaginatedResult: list query parameters and results
- Service: generic CRUD service over a repository
"""

from .pagination import PaginatedResult, Pagination, SearchTerm
from .service import Service

__all__ = ["PaginatedResult", "Pagination", "SearchTerm", "Service"]
