"""
Base service layer for table-backed resources
One parameterized SQL statement per operation, executed on the injected pool.
"""

import logging
from typing import Dict, Any, List, Optional, Sequence
from dataclasses import dataclass

import asyncpg

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

def affected_rows(status: str) -> int:
    """Extract the row count from an asyncpg command status such as 'UPDATE 1'"""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0

class BaseService:
    """Base service mapping CRUD operations onto a single table"""

    table_name: str = ""
    id_field: str = "id"
    # SERIAL primary keys are int4
    max_id: int = 2147483647
    fields: Sequence[str] = ()

    def __init__(self, db_pool: asyncpg.Pool):
        if not self.table_name or not self.fields:
            raise ValueError(f"{type(self).__name__} must define table_name and fields")
        self.db_pool = db_pool

    @property
    def columns(self) -> str:
        return ", ".join([self.id_field, *self.fields])

    def _valid_id(self, record_id: int) -> bool:
        return 1 <= record_id <= self.max_id

    def _not_found(self, record_id: int) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"Record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )

    async def read_all(self) -> ServiceResult:
        """Read every record of the table ordered by id"""
        query = f"SELECT {self.columns} FROM {self.table_name} ORDER BY {self.id_field}"

        async with self.db_pool.acquire() as conn:
            rows = await conn.fetch(query)

        data = [dict(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def get_by_id(self, record_id: int) -> ServiceResult:
        """
        Get a single record by primary key

        Args:
            record_id: Primary key value

        Returns:
            ServiceResult with the record, or RESOURCE_NOT_FOUND
        """
        if not self._valid_id(record_id):
            return self._not_found(record_id)

        query = f"SELECT {self.columns} FROM {self.table_name} WHERE {self.id_field} = $1"

        async with self.db_pool.acquire() as conn:
            row = await conn.fetchrow(query, record_id)

        if row is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new record and return the identifier assigned by the store

        Args:
            data: Dictionary of field values to insert

        Returns:
            ServiceResult whose single data row is {"id": ...}
        """
        values = [data[field] for field in self.fields]
        placeholders = ", ".join(f"${i}" for i in range(1, len(self.fields) + 1))
        query = (
            f"INSERT INTO {self.table_name} ({', '.join(self.fields)}) "
            f"VALUES ({placeholders}) RETURNING {self.id_field}"
        )

        async with self.db_pool.acquire() as conn:
            record_id = await conn.fetchval(query, *values)

        logger.info(f"Created {self.table_name} record {record_id}")
        return ServiceResult(success=True, data=[{self.id_field: record_id}], count=1)

    async def update(self, record_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Replace every writable field of a record

        The existence check is the affected-row count of the UPDATE itself.

        Args:
            record_id: Primary key value of record to update
            data: Dictionary holding a value for every writable field

        Returns:
            ServiceResult with the row count, or RESOURCE_NOT_FOUND
        """
        if not self._valid_id(record_id):
            return self._not_found(record_id)

        values = [data[field] for field in self.fields]
        assignments = ", ".join(f"{field} = ${i}" for i, field in enumerate(self.fields, start=1))
        query = (
            f"UPDATE {self.table_name} SET {assignments} "
            f"WHERE {self.id_field} = ${len(self.fields) + 1}"
        )

        async with self.db_pool.acquire() as conn:
            status = await conn.execute(query, *values, record_id)

        count = affected_rows(status)
        if count == 0:
            return self._not_found(record_id)

        logger.info(f"Updated {self.table_name} record {record_id}")
        return ServiceResult(success=True, count=count)

    async def delete(self, record_id: int) -> ServiceResult:
        """
        Delete a record by primary key

        Args:
            record_id: Primary key value of record to delete

        Returns:
            ServiceResult with the row count, or RESOURCE_NOT_FOUND
        """
        if not self._valid_id(record_id):
            return self._not_found(record_id)

        query = f"DELETE FROM {self.table_name} WHERE {self.id_field} = $1"

        async with self.db_pool.acquire() as conn:
            status = await conn.execute(query, record_id)

        count = affected_rows(status)
        if count == 0:
            return self._not_found(record_id)

        logger.info(f"Deleted {self.table_name} record {record_id}")
        return ServiceResult(success=True, count=count)
