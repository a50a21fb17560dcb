"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Dict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from domain.value_objects import PageRequest
from constants import PaginationDefaults
from exceptions import DatabaseError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    # Sortable properties, as named by clients, mapped to model attribute names
    sort_properties: Dict[str, str] = {"id": "id"}
    default_sort_property = PaginationDefaults.DEFAULT_SORT_PROPERTY

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_page(self, page_request: PageRequest) -> List[T]:
        """
        Retrieve one page of records in the requested order.

        Unknown sort properties are ignored; the primary key is always the
        last ordering so pages never overlap.

        Args:
            page_request: Page index, size and sort orders

        Returns:
            List of model instances
        """
        ordering = []
        for order in page_request.sort:
            attr = self.sort_properties.get(order.property)
            if attr is None:
                logger.debug(f"Ignoring unknown sort property '{order.property}' on {self.model.__name__}")
                continue
            column = getattr(self.model, attr)
            ordering.append(column.desc() if order.is_descending else column.asc())
        ordering.append(getattr(self.model, self.default_sort_property).asc())

        return (
            self.db.query(self.model)
            .order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def commit(self, operation: str) -> None:
        """
        Commit the current unit of work.

        Raises:
            DatabaseError: If the commit fails (the session is rolled back)
        """
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{operation} failed on {self.model.__tablename__}: {e}", exc_info=True)
            raise DatabaseError(operation, str(e))

    def add(self, obj: T) -> T:
        """Stage a new record and commit it."""
        self.db.add(obj)
        self.commit("insert")
        self.db.refresh(obj)
        return obj

    def delete_by_id(self, id: str) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        deleted = self.db.query(self.model).filter(self.model.id == id).delete(synchronize_session=False)
        self.commit("delete")
        return deleted > 0
