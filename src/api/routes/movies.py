"""
Movie management API routes
Every operation issues a single SQL statement through MoviesService.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response, status

from models.common import CreatedResponse
from models.movie import MovieCreateRequest, MovieUpdateRequest, MovieResponse
from services.movies_service import MoviesService, get_movies_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[MovieResponse])
async def get_movies(movies_service: MoviesService = Depends(get_movies_service)):
    """List all movies"""
    result = await movies_service.get_movies()
    return result.data

@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(movie_id: int, movies_service: MoviesService = Depends(get_movies_service)):
    """Get movie details"""
    result = await movies_service.get_movie_by_id(movie_id)

    if not result.success:
        raise HTTPException(status_code=404, detail="Movie not found")

    return result.data[0]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_movie(
    request: MovieCreateRequest,
    movies_service: MoviesService = Depends(get_movies_service)
):
    """Create a new movie"""
    result = await movies_service.create_movie(request)
    return result.data[0]

@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_movie(
    movie_id: int,
    request: MovieUpdateRequest,
    movies_service: MoviesService = Depends(get_movies_service)
):
    """Replace movie details"""
    result = await movies_service.update_movie(movie_id, request)

    if not result.success:
        raise HTTPException(status_code=404, detail="Movie not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: int, movies_service: MoviesService = Depends(get_movies_service)):
    """Delete a movie"""
    result = await movies_service.delete_movie(movie_id)

    if not result.success:
        raise HTTPException(status_code=404, detail="Movie not found")

    logger.info(f"Movie {movie_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
