import pytest
import os
import uuid
from datetime import date, datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from leave_tracker.database import Base, get_db
from leave_tracker.main import app
from leave_tracker.models.enums import LeaveType
from leave_tracker.routers.deps import get_now
from leave_tracker.schemas.leave import LeaveEntry
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

# Frozen request clock: 20 July 2025, after the RTT posting day
FIXED_NOW = datetime(2025, 7, 20, 9, 0, tzinfo=timezone.utc)

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def make_leave():
    """Factory for engine-level LeaveEntry snapshots."""
    def _make_leave(leave_type, start, end=None, working_days=1.0, is_forecast=False, leave_id=None, **extra):
        start = date.fromisoformat(start) if isinstance(start, str) else start
        end = date.fromisoformat(end) if isinstance(end, str) else (end or start)
        return LeaveEntry(
            id=leave_id or str(uuid.uuid4()),
            type=LeaveType(leave_type),
            start_date=start,
            end_date=end,
            working_days=working_days,
            is_forecast=is_forecast,
            **extra
        )
    return _make_leave

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session and a frozen clock."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
