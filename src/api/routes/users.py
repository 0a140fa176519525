"""
User management API routes
Every operation issues a single SQL statement through UsersService.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response, status

from models.common import CreatedResponse
from models.user import UserCreateRequest, UserUpdateRequest, UserResponse
from services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[UserResponse])
async def get_users(users_service: UsersService = Depends(get_users_service)):
    """List all users"""
    result = await users_service.get_users()
    return result.data

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, users_service: UsersService = Depends(get_users_service)):
    """Get user details"""
    result = await users_service.get_user_by_id(user_id)

    if not result.success:
        raise HTTPException(status_code=404, detail="User not found")

    return result.data[0]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_user(
    request: UserCreateRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a new user"""
    result = await users_service.create_user(request)
    return result.data[0]

@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Replace user details"""
    result = await users_service.update_user(user_id, request)

    if not result.success:
        raise HTTPException(status_code=404, detail="User not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, users_service: UsersService = Depends(get_users_service)):
    """Delete a user"""
    result = await users_service.delete_user(user_id)

    if not result.success:
        raise HTTPException(status_code=404, detail="User not found")

    logger.info(f"User {user_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
