import os

# przed importem storefront: taski Celery inline, bez brokera
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "1")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")
os.environ.setdefault("OWNER_USER_ID", "owner-1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from storefront.api.security import create_session_token
from storefront.data.database import Database
from storefront.data.models import ProductModel, PromoCodeModel, UserModel
from storefront.domain.ids import new_id
from storefront.main import create_app


@pytest.fixture
def database():
    return Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def client(database):
    app = create_app(database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(client, database):
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def users(session):
    rows = {
        "customer": UserModel(id="user-1", name="Alice", email="alice@example.com", role="user"),
        "other": UserModel(id="user-2", name="Bob", email="bob@example.com", role="user"),
        "merchant": UserModel(id="merchant-1", name="Mia", email="mia@example.com", role="merchant"),
        "merchant2": UserModel(id="merchant-2", name="Max", email="max@example.com", role="merchant"),
        "admin": UserModel(id="admin-1", name="Ada", email="ada@example.com", role="admin"),
    }
    session.add_all(rows.values())
    session.commit()
    return rows


@pytest.fixture
def auth():
    def _headers(user: UserModel) -> dict:
        return {"Authorization": f"Bearer {create_session_token(user.id)}"}

    return _headers


@pytest.fixture
def make_product(session):
    def _make(**kwargs):
        data = {
            "id": new_id("prod"),
            "name": "Barley Powder",
            "price": 2500,
            "stock": 10,
            "active": True,
            "featured": False,
        }
        data.update(kwargs)
        product = ProductModel(**data)
        session.add(product)
        session.commit()
        return product

    return _make


@pytest.fixture
def make_promo(session):
    def _make(**kwargs):
        data = {
            "id": new_id("promo"),
            "code": "SAVE10",
            "discount_type": "percentage",
            "discount_value": 10,
            "min_purchase": 0,
            "current_uses": 0,
            "active": True,
        }
        data.update(kwargs)
        promo = PromoCodeModel(**data)
        session.add(promo)
        session.commit()
        return promo

    return _make
