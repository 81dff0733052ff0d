import os

# must be set before the app (and its Settings) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["NODE_ENV"] = "test"
os.environ["OPENROUTER_API_KEY"] = ""
os.environ["SMTP_USER"] = ""
os.environ["SMTP_PASS"] = ""

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_db():
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
    return TestClient(app)


@pytest.fixture
def make_client():
    def _make():
        return TestClient(app)
    return _make


def signup(client, username="ann", email="a@x.com", password="secret1"):
    return client.post(
        "/api/auth/signup",
        json={"username": username, "email": email, "password": password},
    )


@pytest.fixture
def auth_client(client):
    res = signup(client)
    assert res.status_code == 200
    return client
