"""
Generic CRUD service used by every entity service.

Each service stores one entity type and exposes list / get / create /
update / delete. Absence is a return value (None / False), never an
exception. Invalid references raise ValueError, which the route layer
answers with 400.

Reference: https://docs.sqlalchemy.org/en/20/orm/queryguide/
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nursery.core.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudService(Generic[ModelT]):
    """
    Database operations for one entity type.

    Subclasses set:
        model: SQLAlchemy model class
        filter_fields: Columns that list_all() accepts as equality filters
        references: Column name -> model class the column must point at
    """

    model: Type[ModelT]
    filter_fields: tuple[str, ...] = ()
    references: Dict[str, Type[Base]] = {}

    @property
    def label(self) -> str:
        return self.model.__name__

    async def get(self, db: AsyncSession, record_id: str) -> Optional[ModelT]:
        """
        Get a record by ID.

        Args:
            db: Database session
            record_id: Record ID

        Returns:
            Record if found, None otherwise
        """
        return await db.get(self.model, record_id)

    async def list_all(self, db: AsyncSession, **filters: Optional[str]) -> List[ModelT]:
        """
        Get all records, optionally narrowed by parent ID filters.

        Filters with a None value are ignored, so ``list_all(db, plant_id=None)``
        returns every record.

        Raises:
            ValueError: If a filter is not supported for this entity
        """
        query = select(self.model)
        for field, value in filters.items():
            if field not in self.filter_fields:
                raise ValueError(f"{self.label} records cannot be filtered by {field}")
            if value is not None:
                query = query.where(getattr(self.model, field) == value)

        created_at = getattr(self.model, "created_at", None)
        if created_at is not None:
            query = query.order_by(created_at)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, data: BaseModel) -> ModelT:
        """
        Create a new record.

        ID and creation timestamp are assigned here; any client-supplied
        values for them never reach the insert schema.

        Raises:
            ValueError: If a referenced record does not exist
        """
        values = data.model_dump(mode="json")
        await self._check_references(db, values)
        await self._before_write(db, values, None)

        record = self.model(**values)
        db.add(record)
        await self._flush(db)
        logger.info(f"Created {self.label} {record.id}")
        return record

    async def update(
        self, db: AsyncSession, record_id: str, data: BaseModel
    ) -> Optional[ModelT]:
        """
        Update a record.

        Only provided fields will be updated (partial update).

        Returns:
            Updated record if found, None otherwise

        Raises:
            ValueError: If a referenced record does not exist or the merged
                record breaks a cross-field rule
        """
        record = await self.get(db, record_id)
        if not record:
            return None

        values = data.model_dump(mode="json", exclude_unset=True)
        await self._check_references(db, values)
        await self._before_write(db, values, record)

        for field, value in values.items():
            setattr(record, field, value)

        await self._flush(db)
        logger.info(f"Updated {self.label} {record_id} ({', '.join(sorted(values)) or 'no fields'})")
        return record

    async def delete(self, db: AsyncSession, record_id: str) -> bool:
        """
        Delete a record. Records that reference it are left untouched.

        Returns:
            True if a record was deleted, False if not found
        """
        record = await self.get(db, record_id)
        if not record:
            return False

        await db.delete(record)
        await db.flush()
        logger.info(f"Deleted {self.label} {record_id}")
        return True

    async def _check_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        for field, target in self.references.items():
            target_id = values.get(field)
            if target_id is None:
                continue
            if await db.get(target, target_id) is None:
                raise ValueError(f"{target.__name__} {target_id} does not exist")

    async def _before_write(
        self, db: AsyncSession, values: Dict[str, Any], record: Optional[ModelT]
    ) -> None:
        """Hook for entity-specific checks; record is None on create."""

    async def _flush(self, db: AsyncSession) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            logger.error(f"Failed to write {self.label} due to database error", exc_info=True)
            raise ValueError(
                f"Failed to write {self.label} due to database constraints"
            ) from e
