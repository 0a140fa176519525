"""
Users & Movies REST API
CRUD over the users and movies tables, one parameterized statement per request.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, DB_CREATE_TABLES
from database.connection import init_database, close_database
from database.schema import create_tables
from api.routes import health, users, movies
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: owns the database pool"""
    app.state.db_pool = await init_database()
    if DB_CREATE_TABLES:
        await create_tables(app.state.db_pool)
    try:
        yield
    finally:
        await close_database(app.state.db_pool)

app = FastAPI(
    title="Users & Movies API",
    description="CRUD API for users and movies",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

setup_error_handling(app)

# Fixed route table
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(movies.router, prefix="/api/movies", tags=["Movies"])
