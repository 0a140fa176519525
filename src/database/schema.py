"""
Table definitions for the users and movies resources
"""

import logging

import asyncpg

logger = logging.getLogger(__name__)

USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id SERIAL PRIMARY KEY,
    firstname VARCHAR(255) NOT NULL,
    lastname VARCHAR(255) NOT NULL,
    email VARCHAR(255) NOT NULL,
    city VARCHAR(255) NOT NULL,
    language VARCHAR(255) NOT NULL
)
"""

MOVIES_TABLE = """
CREATE TABLE IF NOT EXISTS movies (
    id SERIAL PRIMARY KEY,
    title VARCHAR(255) NOT NULL,
    director VARCHAR(255) NOT NULL,
    year VARCHAR(255) NOT NULL,
    color VARCHAR(255) NOT NULL,
    duration INTEGER NOT NULL
)
"""

async def create_tables(db_pool: asyncpg.Pool):
    """Create the users and movies tables if they do not exist yet"""
    async with db_pool.acquire() as conn:
        await conn.execute(USERS_TABLE)
        await conn.execute(MOVIES_TABLE)
    logger.info("Tables users and movies are ready")
