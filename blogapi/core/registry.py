"""Service registry for dependency injection."""

from typing import Any, Callable, Dict, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

_services: Dict[Type, Type] = {}


def register_service(service_class: Type[T]) -> Type[T]:
    """Register a service class for dependency injection.

    Args:
        service_class: The service class to register

    Returns:
        The registered service class
    """
    _services[service_class] = service_class
    return service_class


def get_service_factory(service_class: Type[T]) -> Callable[..., T]:
    """Get a service instance factory for dependency injection.

    Args:
        service_class: The service class to get an instance of

    Returns:
        A callable that creates a service instance from a session and any
        extra collaborators the service needs
    """
    if service_class not in _services:
        raise ValueError(f"Service {service_class.__name__} not registered")

    def create_service(db: AsyncSession, **kwargs: Any) -> T:
        return service_class.from_db(db, **kwargs)

    return create_service
