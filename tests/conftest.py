"""
pytest configuration and shared fixtures
In-memory services stand in for the database in route tests; the integration
suite under tests/integration talks to a real PostgreSQL database.
"""

import pytest
import pytest_asyncio
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx

from app import app
from services.base_service import ServiceResult
from services.users_service import UsersService, get_users_service
from services.movies_service import MoviesService, get_movies_service


class InMemoryStore:
    """Dictionary-backed replacement for one table"""

    def __init__(self, fields):
        self.fields = tuple(fields)
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.next_id = 1

    def _not_found(self, record_id: int) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"Record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )

    def insert(self, data: Dict[str, Any]) -> int:
        record_id = self.next_id
        self.next_id += 1
        self.rows[record_id] = {"id": record_id, **{f: data[f] for f in self.fields}}
        return record_id

    async def read_all(self) -> ServiceResult:
        data = [dict(row) for _, row in sorted(self.rows.items())]
        return ServiceResult(success=True, data=data, count=len(data))

    async def get_by_id(self, record_id: int) -> ServiceResult:
        row = self.rows.get(record_id)
        if row is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        return ServiceResult(success=True, data=[{"id": self.insert(data)}], count=1)

    async def update(self, record_id: int, data: Dict[str, Any]) -> ServiceResult:
        if record_id not in self.rows:
            return self._not_found(record_id)
        self.rows[record_id] = {"id": record_id, **{f: data[f] for f in self.fields}}
        return ServiceResult(success=True, count=1)

    async def delete(self, record_id: int) -> ServiceResult:
        if self.rows.pop(record_id, None) is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, count=1)


class InMemoryUsersService(UsersService):
    """UsersService whose table operations hit an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.read_all = store.read_all
        self.get_by_id = store.get_by_id
        self.create = store.create
        self.update = store.update
        self.delete = store.delete


class InMemoryMoviesService(MoviesService):
    """MoviesService whose table operations hit an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.read_all = store.read_all
        self.get_by_id = store.get_by_id
        self.create = store.create
        self.update = store.update
        self.delete = store.delete


@pytest.fixture
def users_store() -> InMemoryStore:
    return InMemoryStore(UsersService.fields)


@pytest.fixture
def movies_store() -> InMemoryStore:
    return InMemoryStore(MoviesService.fields)


@pytest_asyncio.fixture
async def api_client(users_store, movies_store):
    """HTTP client bound to the app with in-memory services injected"""
    app.dependency_overrides[get_users_service] = lambda: InMemoryUsersService(users_store)
    app.dependency_overrides[get_movies_service] = lambda: InMemoryMoviesService(movies_store)

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


def make_mock_pool(conn: Optional[AsyncMock] = None):
    """Build an asyncpg-like pool whose acquire() yields the given connection"""
    conn = conn or AsyncMock()
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    pool.acquire.return_value.__aexit__.return_value = False
    return pool, conn


@pytest.fixture
def mock_pool():
    return make_mock_pool()


@pytest.fixture
def new_user() -> Dict[str, Any]:
    return {
        "firstname": "Marie",
        "lastname": "Martin",
        "email": "marie.martin@wild.co",
        "city": "Paris",
        "language": "French",
    }


@pytest.fixture
def new_movie() -> Dict[str, Any]:
    return {
        "title": "Citizen Kane",
        "director": "Orson Wells",
        "year": "1941",
        "color": "0",
        "duration": 120,
    }
