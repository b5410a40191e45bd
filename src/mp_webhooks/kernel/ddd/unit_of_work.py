"""Unit of Work port — a short-lived scope over the registration record set."""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from mp_webhooks.kernel.ddd.specification import RegistrationFilter

TRecord = TypeVar("TRecord")


class RegistrationContext(abc.ABC, Generic[TRecord]):
    """Port: transactional scope over persisted registration records.

    Used as an async context manager. Entering acquires the underlying
    resource; leaving always releases it, rolling back first when the block
    raised. Pending changes are only written by an explicit :meth:`commit`.
    Unique-key violations are expected to surface as exceptions from
    :meth:`commit`.
    """

    @abc.abstractmethod
    async def find(self, criteria: RegistrationFilter) -> list[TRecord]: ...

    @abc.abstractmethod
    async def add(self, record: TRecord) -> None: ...

    @abc.abstractmethod
    async def mark_modified(self, record: TRecord) -> None: ...

    @abc.abstractmethod
    async def mark_deleted(self, record: TRecord) -> None: ...

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...

    @abc.abstractmethod
    async def close(self) -> None: ...

    async def find_first(self, criteria: RegistrationFilter) -> TRecord | None:
        records = await self.find(criteria)
        return records[0] if records else None

    async def __aenter__(self) -> "RegistrationContext[TRecord]":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            await self.close()


__all__ = ["RegistrationContext"]
