import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from database.db import Database
from main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        ENV="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    client.post(
        "/auth/register-teacher",
        json={"name": "Kim", "email": "kim@school.test", "password": "pw1234"},
    )
    res = client.post("/auth/login", json={"email": "kim@school.test", "password": "pw1234"})
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def database(settings, anyio_backend):
    db = Database(settings.DB_URL)
    await db.connect()
    yield db
    await db.close()
