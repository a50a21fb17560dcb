from sqlalchemy import Column, String, Text, DateTime, Index
from datetime import datetime, timezone
import json
import uuid
from database import Base


def generate_uuid():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class Delivery(Base):
    """
    Persisted delivery.

    Only the identifier is interpreted by the service. Every other attribute
    of the submitted entity is kept verbatim in payload_json and handed back
    unchanged; an update replaces the whole payload.
    """
    __tablename__ = 'deliveries'

    id = Column(String, primary_key=True, default=generate_uuid)
    payload_json = Column(Text, nullable=False, default='{}')
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_deliveries_created_at', 'created_at'),
    )

    @property
    def attributes(self) -> dict:
        return json.loads(self.payload_json or '{}')

    @attributes.setter
    def attributes(self, value: dict):
        self.payload_json = json.dumps(value or {}, default=str)

    def __repr__(self):
        return f"<Delivery id={self.id!r}>"
