"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and endpoint instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from config.app_config import EndpointConfig, get_delivery_config
from database import get_db
from repositories.delivery_repository import DeliveryRepository
from repositories.interfaces import IDeliveryRepository
from services.delivery_endpoint import DeliveryEndpoint


def get_delivery_repository(db: Session = Depends(get_db)) -> IDeliveryRepository:
    """
    Factory function for creating DeliveryRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IDeliveryRepository: SQLAlchemy-backed delivery repository
    """
    return DeliveryRepository(db)


def get_delivery_endpoint(
    repository: IDeliveryRepository = Depends(get_delivery_repository),
    config: EndpointConfig = Depends(get_delivery_config),
) -> DeliveryEndpoint:
    """
    Factory function for creating DeliveryEndpoint instances.

    Note: Override get_delivery_repository (or this provider) in
    app.dependency_overrides to run the routes against a fake repository.
    """
    return DeliveryEndpoint(repository, config)
