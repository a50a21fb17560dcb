"""
Repository Interfaces

Abstract persistence contract consumed by REST endpoints. Endpoints receive an
implementation through their constructor, so tests can hand in a fake.
"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.value_objects import Page, PageRequest
from schemas import Delivery


class IDeliveryRepository(ABC):
    """Storage operations for deliveries."""

    @abstractmethod
    def save(self, delivery: Delivery) -> Delivery:
        """
        Insert or fully replace a delivery.

        Args:
            delivery: Entity to store; a missing id is assigned on insert

        Returns:
            The stored delivery, id included
        """
        pass

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Delivery]:
        """
        Fetch one page of deliveries.

        Args:
            page_request: Page index, size and sort orders

        Returns:
            Page holding the requested slice and the total element count
        """
        pass

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[Delivery]:
        """
        Fetch a delivery by id.

        Returns:
            The delivery, or None if no delivery has this id
        """
        pass

    @abstractmethod
    def delete_by_id(self, id: str) -> None:
        """
        Delete a delivery by id. Deleting an unknown id is not an error.
        """
        pass
