import os
import tempfile

# settings are read at import time, so point them at a throwaway db first
_DB_DIR = tempfile.mkdtemp(prefix="splito-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"

from types import SimpleNamespace

import httpx
import pytest
import pytest_asyncio

from app.main import app
from app.db.session import Base, engine, async_session


@pytest_asyncio.fixture
async def db_setup():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest_asyncio.fixture
async def db(db_setup):
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_setup):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def trio():
    """Alice, Bob and Carol in one occasion."""
    return [
        SimpleNamespace(id=1, name="Alice"),
        SimpleNamespace(id=2, name="Bob"),
        SimpleNamespace(id=3, name="Carol"),
    ]
