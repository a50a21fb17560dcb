"""
Delivery repository backed by SQLAlchemy.
"""

from typing import Optional
from sqlalchemy.orm import Session
import logging

from domain.value_objects import Page, PageRequest
from models import Delivery as DeliveryModel, generate_uuid
from schemas import Delivery
from .base_repository import BaseRepository
from .interfaces import IDeliveryRepository

logger = logging.getLogger(__name__)


class DeliveryRepository(BaseRepository[DeliveryModel], IDeliveryRepository):
    """Repository for Delivery model operations."""

    sort_properties = {
        "id": "id",
        "createdAt": "created_at",
        "created_at": "created_at",
        "updatedAt": "updated_at",
        "updated_at": "updated_at",
    }

    def __init__(self, db: Session):
        super().__init__(db, DeliveryModel)

    @staticmethod
    def to_entity(row: DeliveryModel) -> Delivery:
        return Delivery.from_attributes_dict(row.id, row.attributes)

    def save(self, delivery: Delivery) -> Delivery:
        """
        Insert a new delivery or replace the stored one with the same id.

        Args:
            delivery: Delivery to store

        Returns:
            Stored delivery
        """
        delivery_id = delivery.id if delivery.id is not None else generate_uuid()
        row = self.get_by_id(delivery_id)

        if row is None:
            row = DeliveryModel(id=delivery_id)
            row.attributes = delivery.attributes()
            self.add(row)
            logger.debug(f"Inserted delivery {delivery_id}")
        else:
            row.attributes = delivery.attributes()
            self.commit("update")
            self.db.refresh(row)
            logger.debug(f"Replaced delivery {delivery_id}")

        return self.to_entity(row)

    def find_all(self, page_request: PageRequest) -> Page[Delivery]:
        """
        Fetch one page of deliveries.

        Args:
            page_request: Page index, size and sort orders

        Returns:
            Page of deliveries with the overall total
        """
        rows = self.get_page(page_request)
        return Page(
            content=[self.to_entity(row) for row in rows],
            page_request=page_request,
            total_elements=self.count(),
        )

    def find_by_id(self, id: str) -> Optional[Delivery]:
        row = self.get_by_id(id)
        return self.to_entity(row) if row else None

    def delete_by_id(self, id: str) -> None:
        if not super().delete_by_id(id):
            logger.debug(f"Delete requested for unknown delivery {id}")
