"""Bridge between the dependency-injector container and FastAPI dependencies."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from retailhub.core import container
from retailhub.database import DatabaseSession

T = TypeVar("T")


def inject_provider(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    The container's ``db`` dependency is bound to the request session only
    while the provider builds its object graph; the built objects keep the
    session they were given.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
