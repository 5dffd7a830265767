"""Base repository: generic lookups, writes and driver-error translation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import Executable, Result, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.exceptions import DataAccessError
from taskboard.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get, get_all, add, delete, flush and savepoint.

    Read and write helpers raise DataAccessError carrying the driver message
    so callers never see SQLAlchemy exceptions.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self._execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _get_all(self) -> list[ModelType]:
        result = await self._execute(select(self.model))
        return list(result.scalars().all())

    async def _execute(self, statement: Executable, operation: str = "read") -> Result[Any]:
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            raise DataAccessError(str(getattr(e, "orig", None) or e), operation) from e

    async def _flush(self, operation: str, refresh: ModelType | None = None) -> None:
        try:
            await self.db.flush()
            if refresh is not None:
                await self.db.refresh(refresh)
        except SQLAlchemyError as e:
            raise DataAccessError(str(getattr(e, "orig", None) or e), operation) from e

    async def _add(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server defaults."""
        self.db.add(obj)
        await self._flush("create", refresh=obj)
        return obj

    async def _save(self, obj: ModelType) -> ModelType:
        await self._flush("update", refresh=obj)
        return obj

    async def _remove(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self._flush("delete")

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Nested transaction: rolled back alone when the block raises."""
        async with self.db.begin_nested():
            yield
