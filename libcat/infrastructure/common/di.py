from collections.abc import Callable
from typing import Any

from dependency_injector import providers

from libcat.core import Container
from libcat.database import DatabaseSession


def inject_use_case(provider_name: str) -> Callable[[DatabaseSession], Any]:
    """
    Create a FastAPI dependency for a container provider.

    Every request gets its own container bound to the request-scoped
    database session, so concurrent requests never share a session.
    """

    def dependency(db: DatabaseSession) -> Any:
        container = Container(db=providers.Object(db))
        return getattr(container, provider_name)()

    return dependency
