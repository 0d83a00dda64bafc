import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from warehouse_api.config import Settings
from warehouse_api.main import create_app
from warehouse_api.database import Base, get_db
from warehouse_api.repositories.product_repository import ProductRepository


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

TEST_API_KEY = "test-api-key"

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


def make_app(api_key: str = TEST_API_KEY):
    """Build an app wired to the in-memory test database."""
    settings = Settings(DATABASE_URL=SQLALCHEMY_DATABASE_URL, API_KEY=api_key)
    app = create_app(settings)
    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture(scope="function")
def app():
    return make_app()


@pytest.fixture(scope="function")
def client(app):
    """Create test client with fresh database for each test."""
    # Create tables
    Base.metadata.create_all(bind=engine)

    with TestClient(app) as test_client:
        yield test_client

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def auth_headers():
    return {"X-API-Key": TEST_API_KEY}


@pytest.fixture(scope="function")
def db_session():
    """Create database session for direct database access in tests."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db_session):
    return ProductRepository(db_session)


@pytest.fixture(scope="function")
def unconfigured_client():
    """Client for an app started without an API_KEY."""
    Base.metadata.create_all(bind=engine)

    with TestClient(make_app(api_key="")) as test_client:
        yield test_client

    Base.metadata.drop_all(bind=engine)
