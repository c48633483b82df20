# tests/conftest.py
import os

# przed importem shopcart, settings czytaja env przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PRODUCT_SERVICE_URL"] = ""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shopcart.data.database import Base, get_db
from shopcart.data.models import UserModel, ProductModel
from shopcart.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_conn, _record):
        dbapi_conn.execute("PRAGMA foreign_keys = ON")

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db):
    alice = UserModel(id=1, name="Alice")
    bob = UserModel(id=2, name="Bob")
    db.add_all([alice, bob])
    db.commit()
    return alice, bob


@pytest.fixture
def products(db):
    keyboard = ProductModel(name="Keyboard", price=Decimal("10.50"), description="Mechanical")
    mouse = ProductModel(name="Mouse", price=Decimal("4.25"), description="Wireless")
    db.add_all([keyboard, mouse])
    db.commit()
    return keyboard, mouse


@pytest.fixture
def client(session_factory, users, products):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
