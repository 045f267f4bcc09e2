import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from todo_api.db.database import create_session_factory, init_db
from todo_api.main import create_app
from todo_api.models.todo_item import TodoItem
from todo_api.services.user import UserService


@pytest.fixture(scope="function")
async def engine():
    """Fresh in-memory database for each test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def user_service(session_factory):
    return UserService(session_factory)


@pytest.fixture
async def client(engine):
    app = create_app(engine=engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def add_todos(session_factory):
    """Inserts todo items for a user id and returns them."""
    async def _add(user_id, *names):
        items = [TodoItem(name=name, user_id=user_id) for name in names]
        async with session_factory() as session:
            session.add_all(items)
            await session.commit()
        return items
    return _add


@pytest.fixture
async def alice(client):
    response = await client.post("/api/User/Register", json={"Username": "alice", "Password": "wonderland"})
    assert response.status_code == 200
    return response.json()


@pytest.fixture
async def auth_headers(client, alice):
    response = await client.post("/api/User/Authenticate", json={"Username": "alice", "Password": "wonderland"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['Token']}"}
