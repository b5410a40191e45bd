"""Application webhooks – WebHookStore port."""
from __future__ import annotations

import abc
from collections.abc import Callable, Iterable

from mp_webhooks.application.webhooks.result import StoreResult
from mp_webhooks.application.webhooks.webhook import WebHook

__all__ = ["WebHookPredicate", "WebHookStore"]

WebHookPredicate = Callable[[WebHook, str], bool]
"""Receives a candidate webhook and its owning user; return True to keep it."""


class WebHookStore(abc.ABC):
    """Port: persist webhook subscriptions per user.

    Read operations return domain objects (or ``None``); write operations
    return a :class:`StoreResult`. User and id keys are normalized with
    :meth:`normalize_key` before use.
    """

    @abc.abstractmethod
    async def get_all_webhooks(self, user: str) -> list[WebHook]: ...

    @abc.abstractmethod
    async def query_webhooks(
        self,
        user: str,
        actions: Iterable[str],
        predicate: WebHookPredicate | None = None,
    ) -> list[WebHook]: ...

    @abc.abstractmethod
    async def lookup_webhook(self, user: str, id: str) -> WebHook | None: ...  # noqa: A002

    @abc.abstractmethod
    async def insert_webhook(self, user: str, webhook: WebHook) -> StoreResult: ...

    @abc.abstractmethod
    async def update_webhook(self, user: str, webhook: WebHook) -> StoreResult: ...

    @abc.abstractmethod
    async def delete_webhook(self, user: str, id: str) -> StoreResult: ...  # noqa: A002

    @abc.abstractmethod
    async def delete_all_webhooks(self, user: str) -> None: ...

    @abc.abstractmethod
    async def query_webhooks_across_all_users(
        self,
        actions: Iterable[str],
        predicate: WebHookPredicate | None = None,
    ) -> list[WebHook]: ...

    @staticmethod
    def normalize_key(key: str) -> str:
        return key.lower()

    @staticmethod
    def matches_any_action(webhook: WebHook | None, actions: Iterable[str]) -> bool:
        return webhook is not None and webhook.matches_any_action(actions)

    @staticmethod
    def default_predicate(webhook: WebHook, user: str) -> bool:  # noqa: ARG004
        return True
