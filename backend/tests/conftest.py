import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Configuration is read at import time, so pin it before importing the app
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="delivery-api-tests-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_NAME"] = "crownApp"
os.environ["ALERT_TRANSLATION"] = "true"

# Now import after path and environment are set
import pytest
from typing import Dict, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.app_config import EndpointConfig
from database import Base, get_db
from domain.value_objects import Page, PageRequest
from models import generate_uuid
from repositories.delivery_repository import DeliveryRepository
from repositories.interfaces import IDeliveryRepository
from schemas import Delivery
from services.delivery_endpoint import DeliveryEndpoint


class InMemoryDeliveryRepository(IDeliveryRepository):
    """Dict-backed repository that records every call it receives."""

    def __init__(self):
        self.items: Dict[str, Delivery] = {}
        self.saved: List[Delivery] = []
        self.deleted: List[str] = []

    def save(self, delivery: Delivery) -> Delivery:
        self.saved.append(delivery)
        delivery_id = delivery.id if delivery.id is not None else generate_uuid()
        stored = Delivery.from_attributes_dict(delivery_id, delivery.attributes())
        self.items[stored.id] = stored
        return stored

    def find_all(self, page_request: PageRequest) -> Page[Delivery]:
        descending = any(o.property == "id" and o.is_descending for o in page_request.sort)
        ordered = sorted(self.items.values(), key=lambda d: d.id, reverse=descending)
        start = page_request.offset
        return Page(ordered[start:start + page_request.size], page_request, len(ordered))

    def find_by_id(self, id: str) -> Optional[Delivery]:
        return self.items.get(id)

    def delete_by_id(self, id: str) -> None:
        self.deleted.append(id)
        self.items.pop(id, None)


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def delivery_repository(db_session):
    return DeliveryRepository(db_session)


@pytest.fixture
def fake_repository():
    return InMemoryDeliveryRepository()


@pytest.fixture
def endpoint_config():
    return EndpointConfig(application_name="crownApp", entity_name="delivery", enable_translation=True)


@pytest.fixture
def endpoint(fake_repository, endpoint_config):
    return DeliveryEndpoint(fake_repository, endpoint_config)


@pytest.fixture
def client(db_session):
    """TestClient whose routes use the in-memory test database"""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
