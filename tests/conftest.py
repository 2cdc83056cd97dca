import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.models.booking import BookingRequest
from app.services.booking_store import BookingStore

@pytest.fixture
def client():
    # Entering the context runs the lifespan, so every test gets an empty store
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def store():
    return BookingStore()

@pytest.fixture
def make_request():
    def _make(name="Alice", email="a@x.com", service="Haircut", date="2024-05-01T10:00:00Z"):
        return BookingRequest(name=name, email=email, service=service, date=date)
    return _make
