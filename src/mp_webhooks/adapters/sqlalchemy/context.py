"""SQLAlchemy adapter – SqlAlchemyRegistrationContext."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mp_webhooks.kernel.ddd import RegistrationContext, RegistrationFilter

TModel = TypeVar("TModel")


class SqlAlchemyRegistrationContext(RegistrationContext[TModel], Generic[TModel]):
    """Registration context bound to one :class:`AsyncSession`.

    The session is created on ``__aenter__`` and closed on exit. Filters are
    pushed down as ``WHERE`` clauses via ``filter_by``.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], model: type[TModel]) -> None:
        self._factory = session_factory
        self._model = model
        self.session: Any = None

    async def __aenter__(self) -> "SqlAlchemyRegistrationContext[TModel]":
        self.session = self._factory()
        return self

    async def find(self, criteria: RegistrationFilter) -> list[TModel]:
        stmt = select(self._model).filter_by(**criteria.criteria())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, record: TModel) -> None:
        self.session.add(record)

    async def mark_modified(self, record: TModel) -> None:
        # attribute changes on a loaded instance are tracked by the session
        self.session.add(record)

    async def mark_deleted(self, record: TModel) -> None:
        await self.session.delete(record)

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None


__all__ = ["SqlAlchemyRegistrationContext"]
