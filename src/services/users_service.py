"""
Users service - data access for the users table
"""

import logging

import asyncpg
from fastapi import Depends

from database.connection import get_db_pool
from models.user import UserRequest
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class UsersService(BaseService):
    """Service for user management operations"""

    table_name = "users"
    fields = ("firstname", "lastname", "email", "city", "language")

    async def get_users(self) -> ServiceResult:
        return await self.read_all()

    async def get_user_by_id(self, user_id: int) -> ServiceResult:
        return await self.get_by_id(user_id)

    async def create_user(self, user: UserRequest) -> ServiceResult:
        """Create a new user"""
        logger.info(f"Creating new user: {user.email}")
        return await self.create(user.model_dump())

    async def update_user(self, user_id: int, user: UserRequest) -> ServiceResult:
        """Replace all fields of an existing user"""
        return await self.update(user_id, user.model_dump())

    async def delete_user(self, user_id: int) -> ServiceResult:
        return await self.delete(user_id)

def get_users_service(db_pool: asyncpg.Pool = Depends(get_db_pool)) -> UsersService:
    """Build a users service bound to the application pool"""
    return UsersService(db_pool)
