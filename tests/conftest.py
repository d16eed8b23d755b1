"""
Pytest fixtures for the food court API.

Every test gets a fresh in-memory SQLite database shared by the test
session and the app (StaticPool keeps the single connection alive).
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foodcourt.core.config import settings
from foodcourt.database import get_db
from foodcourt.db.base import Base
from foodcourt.db.models.item import Item
from foodcourt.db.models.waiter import Waiter, WaiterStatus
from foodcourt.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def reports_dir(tmp_path, monkeypatch):
    directory = tmp_path / "reports"
    monkeypatch.setattr(settings, "REPORTS_DIR", str(directory))
    return directory


@pytest.fixture
def client(session_factory, reports_dir):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db):
    """Two catalog items: Masala Dosa (150.00) and Cold Coffee (90.00)."""
    dosa = Item(name="Masala Dosa", price_cents=15000)
    coffee = Item(name="Cold Coffee", price_cents=9000)
    db.add_all([dosa, coffee])
    db.commit()
    return {"dosa": dosa, "coffee": coffee}


@pytest.fixture
def waiters(db):
    asha = Waiter(name="Asha", phone="9876543210", status=WaiterStatus.FREE)
    ravi = Waiter(name="Ravi", phone="9876512345", status=WaiterStatus.ENGAGED)
    db.add_all([asha, ravi])
    db.commit()
    return {"asha": asha, "ravi": ravi}
