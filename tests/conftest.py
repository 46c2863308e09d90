"""
QleanMe Test Configuration

Runs the API against an in-memory SQLite database with Redis disabled and
no payment delay. Environment must be set before qleanme is imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_ENABLED"] = "false"
os.environ["PAYMENT_SIMULATION_DELAY_SECONDS"] = "0"
os.environ["SECRET_KEY"] = "test-secret-key"

from datetime import date, datetime, time, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from qleanme.auth import ACCOUNT_NEW_USER, ACCOUNT_USER, ACCOUNT_WORKER, create_access_token  # noqa: E402
from qleanme.database import Base, get_db  # noqa: E402
from qleanme.main import app  # noqa: E402
from qleanme.models import Address, Order, OrderAddon, User, Worker  # noqa: E402

USER_PHONE = "+16045551234"
WORKER_PHONE = "+16045559876"
NEW_PHONE = "+16045550000"


# ============================================================================
# DATABASE
# ============================================================================


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# ACCOUNTS
# ============================================================================


def auth_headers(phone_number: str, account_type: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(phone_number, account_type)}"}


@pytest.fixture
def user(db_session):
    user = User(
        id=1,
        full_name="Jane Doe",
        email="jane@example.com",
        phone_number=USER_PHONE,
        notifications_enabled=True,
        signup_date=date(2024, 1, 15),
        loyalty_points=100,
        photo_url="https://example.com/jane.png",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def worker(db_session):
    worker = Worker(
        full_name="Sam Cleaner",
        phone_number=WORKER_PHONE,
        email="sam@qleanme.com",
        amount_of_orders=4,
        total_rating=18,
        worker_level="pro",
        bio="Five years of deep cleaning",
        years_of_experience=5,
        worker_type="cleaner",
        photo_url="https://example.com/sam.png",
    )
    db_session.add(worker)
    db_session.commit()
    db_session.refresh(worker)
    return worker


@pytest.fixture
def user_headers(user):
    return auth_headers(USER_PHONE, ACCOUNT_USER)


@pytest.fixture
def worker_headers(worker):
    return auth_headers(WORKER_PHONE, ACCOUNT_WORKER)


@pytest.fixture
def new_user_headers():
    return auth_headers(NEW_PHONE, ACCOUNT_NEW_USER)


@pytest.fixture
def default_address(db_session, user):
    address = Address(
        user_id=user.id,
        title="Home",
        full_address="123 Main St, Vancouver, BC V6B 2W9",
        address_type="home",
        is_default=True,
    )
    db_session.add(address)
    db_session.commit()
    db_session.refresh(address)
    return address


# ============================================================================
# ORDERS
# ============================================================================


def booking_time(days_ahead: int = 5, hour: int = 10) -> datetime:
    return datetime.combine(date.today() + timedelta(days=days_ahead), time(hour, 0))


@pytest.fixture
def make_order(db_session, user):
    def _make_order(**overrides):
        data = {
            "user_id": user.id,
            "type": "Deep Cleaning",
            "status": "pending",
            "date_time": booking_time(),
            "address": "123 Main St, Vancouver, BC",
            "price": 199.99,
            "is_completed": False,
            "duration": 120,
        }
        addons = overrides.pop("addons", [])
        data.update(overrides)
        order = Order(**data)
        order.addons = [OrderAddon(addon=name) for name in addons]
        db_session.add(order)
        db_session.commit()
        db_session.refresh(order)
        return order

    return _make_order
