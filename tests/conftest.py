import os

# Keep the application engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Override the dependency
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def client():
    """Create test client with fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    with TestClient(app) as test_client:
        yield test_client

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create database session for direct database access in tests."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def product_payload():
    return {
        "name": "Widget",
        "description": "A useful widget",
        "price": 9.99,
        "category": "Tools",
        "stock": 25,
        "sku": "WID-001",
        "brand": "Acme",
    }


@pytest.fixture
def user_payload():
    return {
        "username": "alice",
        "email": "a@x.com",
        "fullName": "Alice Anderson",
        "phone": "555-0100",
        "address": "1 Main St",
        "city": "Colombo",
        "country": "Sri Lanka",
        "status": "ACTIVE",
    }


@pytest.fixture
def order_payload():
    return {
        "orderNumber": "ORD-1001",
        "userId": 1,
        "totalAmount": 59.97,
        "paymentMethod": "CREDIT_CARD",
        "shippingAddress": "1 Main St",
        "items": [
            {"productId": 1, "quantity": 2, "unitPrice": 9.99, "subtotal": 19.98},
            {"productId": 2, "quantity": 1, "unitPrice": 39.99, "subtotal": 39.99},
        ],
    }
