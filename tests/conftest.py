import os
import tempfile
from pathlib import Path

# Point the app at a throwaway database before anything imports settings
_TEST_DIR = Path(tempfile.mkdtemp(prefix="nursery-pos-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'test.db'}"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from nursery_pos.database import Base, SessionLocal, engine, init_db
from nursery_pos.main import app
from nursery_pos.services.billing import Cart


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    with engine.begin() as connection:
        connection.exec_driver_sql("DROP TABLE IF EXISTS alembic_version")

    init_db()

    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db):
    app.state.cart = Cart()

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def aloe_vera(client):
    response = client.post("/products", json={"name": "Aloe Vera", "price": 150})
    assert response.status_code == 201
    return response.json()["id"]
