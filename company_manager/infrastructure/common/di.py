from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from company_manager.core import container

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[Session], T]:
    """
    Create a factory that builds a container provider against a session.

    The container's db dependency is overridden only while the provider runs.
    """

    def dependency(db: Session) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
