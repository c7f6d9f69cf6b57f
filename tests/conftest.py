import os

# musi byc przed importem storefront, engine tworzy sie przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.main import app
from storefront.api.routers import carts
from storefront.data.database import Base, get_db
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService


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
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def redis_server():
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server):
    return fakeredis.FakeRedis(server=redis_server)


@pytest.fixture
def cart_repo(redis_client):
    return CartRepo(client=redis_client)


@pytest.fixture
def cart_service(cart_repo):
    return CartService(cart_repo)


@pytest.fixture
def order_service(db):
    return OrderService(db)


@pytest.fixture
def client(cart_repo, session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[carts.get_service] = lambda: CartService(cart_repo)
    app.dependency_overrides[get_db] = _get_db

    yield TestClient(app)

    app.dependency_overrides.clear()
