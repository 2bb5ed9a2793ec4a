"""Fixtures: osobna baza SQLite w tmp_path dla kazdego testu i klient HTTP.

Dependency session factory jest nadpisane, wiec lifespan nie jest potrzebny.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.data.database import (
    create_engine, create_session_factory, create_tables, get_session_factory,
)
from users_api.main import create_app
from users_api.repos.user_repo import UserRepo


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
def repo(test_session_factory):
    return UserRepo(test_session_factory)


@pytest.fixture
def app(test_session_factory):
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def created_user(client):
    """Tworzy uzytkownika przez API i zwraca jego ID."""
    res = await client.post(
        "/users", json={"name": "Alice", "email": "alice@example.com"},
    )
    assert res.status_code == 201
    return int(res.headers["location"].rsplit("/", 1)[1])
