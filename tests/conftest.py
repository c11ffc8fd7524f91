"""Shared fixtures: in-memory database, stubbed notification tasks, admin token"""
import os

from passlib.hash import pbkdf2_sha256

ADMIN_EMAIL = "owner@sriragavendreagro.com"
ADMIN_PASSWORD = "coconut-grove-2024"

# Settings are read once at import time, so the environment has to be ready first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["ADMIN_PASSWORD_HASH"] = pbkdf2_sha256.hash(ADMIN_PASSWORD)
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-admin-tokens"
os.environ["EMAIL_NOTIFICATIONS_ENABLED"] = "true"
os.environ["OWNER_NOTIFICATION_EMAIL"] = ADMIN_EMAIL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.config.database import get_db  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models import Base  # noqa: E402
from app.tasks import email_tasks  # noqa: E402


class FakeTask:
    """Records apply_async calls instead of talking to the broker"""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def apply_async(self, args=None, kwargs=None, **options):
        self.calls.append({"args": args, "kwargs": kwargs, "options": options})
        if self.error:
            raise self.error


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
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def appointment_task(monkeypatch):
    task = FakeTask()
    monkeypatch.setattr(email_tasks, "send_appointment_confirmation_email", task)
    return task


@pytest.fixture(autouse=True)
def order_task(monkeypatch):
    task = FakeTask()
    monkeypatch.setattr(email_tasks, "send_order_confirmation_email", task)
    return task


def disk_full(*args, **kwargs):
    raise OperationalError("INSERT", {}, Exception("disk full"))


@pytest.fixture
def failing_commit(monkeypatch):
    """Every commit fails; returns the sessions that were rolled back"""
    rolled_back = []
    original_rollback = Session.rollback

    def rollback(self):
        rolled_back.append(self)
        original_rollback(self)

    monkeypatch.setattr(Session, "commit", disk_full)
    monkeypatch.setattr(Session, "rollback", rollback)
    return rolled_back


@pytest.fixture
def app(engine):
    application = create_app()
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/v1/admin/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def appointment_payload():
    return {
        "name": "Arun Kumar",
        "email": "arun.kumar@gmail.com",
        "phone": "+91 9843012345",
        "vehicleType": "car",
        "vehicleModel": "Maruti Swift",
        "servicePackage": "premium",
        "date": "2026-11-02",
        "time": "2:00 PM",
        "duration": 45,
        "price": 499,
    }


@pytest.fixture
def order_payload():
    return {
        "name": "Lakshmi Narayanan",
        "email": "lakshmi.n@gmail.com",
        "phone": "+91 9003456789",
        "address": "14 Gandhi Street, RS Puram",
        "city": "Coimbatore",
        "state": "Tamil Nadu",
        "pincode": "641002",
        "items": [
            {"id": "half-liter", "name": "Coconut Oil", "size": "500ml", "price": 150, "quantity": 2},
            {"id": "one-liter", "name": "Coconut Oil", "size": "1 Liter", "price": 280, "quantity": 1},
        ],
        "total": 630,
        "paymentMethod": "cod",
    }
