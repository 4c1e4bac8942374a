"""Shared fixtures: in-memory MongoDB and a FastAPI test client.

Every test gets a fresh mongomock database injected through the
``get_database`` dependency, so no MongoDB server is needed.  The
lifespan handler is not run by ``ASGITransport``; tests therefore never
open a real connection.
"""

import os

# Settings are read at import time.
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from clean_co_api.app.core.db import get_database  # noqa: E402
from clean_co_api.app.core.security import create_access_token  # noqa: E402
from clean_co_api.app.main import app  # noqa: E402


SERVICES = [
    {"name": "Deep clean", "category": "home", "price": 120},
    {"name": "Window wash", "category": "home", "price": 40},
    {"name": "Office sweep", "category": "office", "price": 200},
    {"name": "Carpet shampoo", "category": "home", "price": 80},
    {"name": "Desk sanitising", "category": "office", "price": 60},
]

BOOKINGS = [
    {"email": "a@x.com", "service": "Deep clean", "date": "2024-01-10"},
    {"email": "a@x.com", "service": "Window wash", "date": "2024-02-01"},
    {"email": "b@y.com", "service": "Office sweep", "date": "2024-03-05"},
]


@pytest.fixture
def mongo_db():
    return AsyncMongoMockClient()["CleanCoDB_test"]


@pytest.fixture
async def seeded_db(mongo_db):
    await mongo_db["services"].insert_many([dict(doc) for doc in SERVICES])
    await mongo_db["bookings"].insert_many([dict(doc) for doc in BOOKINGS])
    return mongo_db


@pytest.fixture
async def client(seeded_db):
    """FastAPI test client with the database dependency overridden."""
    app.dependency_overrides[get_database] = lambda: seeded_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


def auth_cookie(claim: dict, **kwargs) -> dict:
    """Headers carrying a freshly signed ``token`` cookie."""
    return {"Cookie": f"token={create_access_token(claim, **kwargs)}"}
