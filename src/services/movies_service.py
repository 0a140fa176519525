"""
Movies service - data access for the movies table
"""

import logging

import asyncpg
from fastapi import Depends

from database.connection import get_db_pool
from models.movie import MovieRequest
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class MoviesService(BaseService):
    """Service for movie management operations"""

    table_name = "movies"
    fields = ("title", "director", "year", "color", "duration")

    async def get_movies(self) -> ServiceResult:
        return await self.read_all()

    async def get_movie_by_id(self, movie_id: int) -> ServiceResult:
        return await self.get_by_id(movie_id)

    async def create_movie(self, movie: MovieRequest) -> ServiceResult:
        """Create a new movie"""
        logger.info(f"Creating new movie: {movie.title}")
        return await self.create(movie.model_dump())

    async def update_movie(self, movie_id: int, movie: MovieRequest) -> ServiceResult:
        """Replace all fields of an existing movie"""
        return await self.update(movie_id, movie.model_dump())

    async def delete_movie(self, movie_id: int) -> ServiceResult:
        return await self.delete(movie_id)

def get_movies_service(db_pool: asyncpg.Pool = Depends(get_db_pool)) -> MoviesService:
    """Build a movies service bound to the application pool"""
    return MoviesService(db_pool)
