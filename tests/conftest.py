import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restaurant.core.security import create_access_token, get_password_hash
from restaurant.db.base import Base
from restaurant.db.session import get_db
from restaurant.main import app
from restaurant.models.menu import MenuItem
from restaurant.models.table import Table, TableType
from restaurant.models.user import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "secret123"
# Hashing is slow; every test user shares one hash
PASSWORD_HASH = get_password_hash(PASSWORD)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db, email, name="Test User", is_admin=False, is_member=False, phone="5550100"):
    user = User(
        name=name,
        email=email,
        phone=phone,
        password_hash=PASSWORD_HASH,
        is_admin=is_admin,
        is_member=is_member,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_header(user):
    return {"Authorization": f"Bearer {create_access_token(subject=str(user.user_id))}"}


def future_day(days=1):
    return date.today() + timedelta(days=days)


@pytest.fixture
def customer(db_session):
    return make_user(db_session, "alice@example.com", name="Alice")


@pytest.fixture
def member(db_session):
    return make_user(db_session, "bob@example.com", name="Bob", is_member=True)


@pytest.fixture
def admin(db_session):
    return make_user(db_session, "admin@example.com", name="Admin", is_admin=True)


@pytest.fixture
def tables(db_session):
    """Three indoor tables seating 2, 4 and 6."""
    indoor = TableType(type="Indoor")
    db_session.add(indoor)
    db_session.flush()
    rows = [
        Table(table_type_id=indoor.table_type_id, location="Window", capacity=2),
        Table(table_type_id=indoor.table_type_id, location="Center", capacity=4),
        Table(table_type_id=indoor.table_type_id, location="Back", capacity=6),
    ]
    db_session.add_all(rows)
    db_session.commit()
    for row in rows:
        db_session.refresh(row)
    return rows


@pytest.fixture
def menu_items(db_session):
    rows = [
        MenuItem(item_name="Margherita", category="Pizza", price=Decimal("12.50")),
        MenuItem(item_name="Tiramisu", category="Dessert", price=Decimal("7.99")),
    ]
    db_session.add_all(rows)
    db_session.commit()
    for row in rows:
        db_session.refresh(row)
    return rows
