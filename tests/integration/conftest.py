"""
Fixtures for the PostgreSQL-backed integration suite
Set TEST_DATABASE_URL to a disposable database to run these tests.
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
import httpx

from app import app
from database.connection import init_database, close_database
from database.schema import create_tables

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")
INTEGRATION_DIR = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    """Mark and, without a database, skip every test in this directory"""
    skip = pytest.mark.skip(reason="TEST_DATABASE_URL not set")
    for item in items:
        if INTEGRATION_DIR in Path(item.path).parents:
            item.add_marker(pytest.mark.integration)
            if not TEST_DATABASE_URL:
                item.add_marker(skip)


@pytest_asyncio.fixture
async def database():
    """Connection pool on the test database, with both tables present"""
    db_pool = await init_database(TEST_DATABASE_URL)
    await create_tables(db_pool)
    try:
        yield db_pool
    finally:
        await close_database(db_pool)


@pytest_asyncio.fixture
async def client(database):
    """HTTP client for the app wired to the test database pool"""
    app.state.db_pool = database
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
    del app.state.db_pool


@pytest_asyncio.fixture
async def existing_user_id(database):
    """Insert a user directly through the pool and return its id"""
    async with database.acquire() as conn:
        return await conn.fetchval(
            "INSERT INTO users (firstname, lastname, email, city, language) "
            "VALUES ($1, $2, $3, $4, $5) RETURNING id",
            "Napoléon", "Bonaparte", "napoleon@wild.co", "Ajaccio", "French"
        )
