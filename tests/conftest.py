import itertools
import os
import tempfile

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATABASE"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "development"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="limpias-uploads-")

import pytest
from fastapi.testclient import TestClient

from app.config.database import Base, SessionLocal, engine
from app.models.product import Product
from app.models.user import User
from app.utils.security import get_password_hash
from main import app

PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make(role="customer", username=None, password=PASSWORD, email=None):
        username = username or f"{role}{next(counter)}"
        user = User(
            username=username,
            email=email or f"{username}@limpiastech.com",
            hashed_password=get_password_hash(password),
            full_name=f"{role.replace('_', ' ').title()} User",
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def login(client):
    def _login(user, password=PASSWORD):
        username = getattr(user, "username", user)
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()

    return _login


@pytest.fixture
def make_product(db):
    def _make(**fields):
        values = {
            "name": "Premium Solar Panel 400W",
            "description": "Monocrystalline panel",
            "price": 100.0,
            "category": "Solar Panels",
            "specifications": {"power": "400W"},
            "stock": 10,
            "featured": False,
        }
        values.update(fields)
        product = Product(**values)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make
