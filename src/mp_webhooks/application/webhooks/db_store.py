"""Application webhooks – DbWebHookStore over a RegistrationContext.

Every operation opens exactly one context from the injected factory, does a
single read and at most one commit, and releases the context on every exit
path. Update and delete are read-then-write inside that one scope; two
writers racing on the same ``(user, id)`` are not detected and the last
commit wins.

Keys are normalized before every lookup, so a row stored with a
non-normalized id (e.g. ``W1`` written by another producer) is returned by
:meth:`get_all_webhooks` and the queries but can never be found by
:meth:`lookup_webhook`, :meth:`update_webhook` or :meth:`delete_webhook`.

Failure handling differs by direction:

* write operations (insert/update/delete) log the failure and return
  :attr:`StoreResult.INTERNAL_ERROR`;
* read operations (and :meth:`delete_all_webhooks`) raise
  :class:`~mp_webhooks.kernel.errors.WebHookStoreError` carrying the cause;
* a registration whose payload cannot be decoded is dropped from results.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from mp_webhooks.application.webhooks.codec import RegistrationMapper
from mp_webhooks.application.webhooks.registration import Registration
from mp_webhooks.application.webhooks.result import StoreResult
from mp_webhooks.application.webhooks.store import WebHookPredicate, WebHookStore
from mp_webhooks.application.webhooks.webhook import WebHook
from mp_webhooks.kernel.ddd import RegistrationContext, RegistrationFilter
from mp_webhooks.kernel.errors import ValidationError, WebHookStoreError
from mp_webhooks.observability.logging import get_logger

__all__ = ["DbWebHookStore"]

logger = get_logger(__name__)

TRegistration = TypeVar("TRegistration", bound=Registration)


def _require(value: object, name: str) -> None:
    if value is None:
        raise ValidationError.required(name)


def _require_actions(actions: object) -> None:
    _require(actions, "actions")
    if isinstance(actions, str):
        raise ValidationError("'actions' must be a collection of action names, not a string", field="actions")


class DbWebHookStore(WebHookStore, Generic[TRegistration]):
    """Webhook store backed by a persistence context.

    Args:
        context_factory: Zero-argument callable returning a fresh
            :class:`RegistrationContext`; called once per operation.
        mapper: Conversion strategy between records and :class:`WebHook`.
    """

    def __init__(
        self,
        context_factory: Callable[[], RegistrationContext[TRegistration]],
        mapper: RegistrationMapper[TRegistration],
    ) -> None:
        self._context_factory = context_factory
        self._mapper = mapper

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_all_webhooks(self, user: str) -> list[WebHook]:
        _require(user, "user")
        user = self.normalize_key(user)

        try:
            async with self._context_factory() as ctx:
                registrations = await ctx.find(RegistrationFilter(user=user))
                return [w for w in map(self._mapper.to_domain, registrations) if w is not None]
        except Exception as exc:
            raise WebHookStoreError("get_all_webhooks", exc) from exc

    async def query_webhooks(
        self,
        user: str,
        actions: Iterable[str],
        predicate: WebHookPredicate | None = None,
    ) -> list[WebHook]:
        _require(user, "user")
        _require_actions(actions)
        user = self.normalize_key(user)
        actions = list(actions)
        predicate = predicate or self.default_predicate

        try:
            async with self._context_factory() as ctx:
                registrations = await ctx.find(RegistrationFilter(user=user))
                matches: list[WebHook] = []
                for registration in registrations:
                    webhook = self._mapper.to_domain(registration)
                    if self.matches_any_action(webhook, actions) and predicate(webhook, user):
                        matches.append(webhook)
                return matches
        except Exception as exc:
            raise WebHookStoreError("query_webhooks", exc) from exc

    async def lookup_webhook(self, user: str, id: str) -> WebHook | None:  # noqa: A002
        _require(user, "user")
        _require(id, "id")
        user = self.normalize_key(user)
        id = self.normalize_key(id)  # noqa: A001

        try:
            async with self._context_factory() as ctx:
                registration = await ctx.find_first(RegistrationFilter(user=user, id=id))
                return self._mapper.to_domain(registration)
        except Exception as exc:
            raise WebHookStoreError("lookup_webhook", exc) from exc

    async def query_webhooks_across_all_users(
        self,
        actions: Iterable[str],
        predicate: WebHookPredicate | None = None,
    ) -> list[WebHook]:
        _require_actions(actions)
        actions = list(actions)
        predicate = predicate or self.default_predicate

        try:
            async with self._context_factory() as ctx:
                registrations = await ctx.find(RegistrationFilter())
                matches: list[WebHook] = []
                for registration in registrations:
                    webhook = self._mapper.to_domain(registration)
                    if self.matches_any_action(webhook, actions) and predicate(webhook, registration.user):
                        matches.append(webhook)
                return matches
        except Exception as exc:
            raise WebHookStoreError("query_webhooks_across_all_users", exc) from exc

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def insert_webhook(self, user: str, webhook: WebHook) -> StoreResult:
        _require(user, "user")
        _require(webhook, "webhook")
        user = self.normalize_key(user)
        webhook = self._normalized(webhook)

        try:
            async with self._context_factory() as ctx:
                await ctx.add(self._mapper.to_persisted(user, webhook))
                await ctx.commit()
        except Exception as exc:  # noqa: BLE001
            logger.error("webhook_store.insert_failed", user=user, webhook_id=webhook.id, exc_info=exc)
            return StoreResult.INTERNAL_ERROR
        return StoreResult.SUCCESS

    async def update_webhook(self, user: str, webhook: WebHook) -> StoreResult:
        _require(user, "user")
        _require(webhook, "webhook")
        user = self.normalize_key(user)
        webhook = self._normalized(webhook)

        try:
            async with self._context_factory() as ctx:
                registration = await ctx.find_first(RegistrationFilter(user=user, id=webhook.id))
                if registration is None:
                    return StoreResult.NOT_FOUND
                self._mapper.apply_to_existing(user, webhook, registration)
                await ctx.mark_modified(registration)
                await ctx.commit()
        except Exception as exc:  # noqa: BLE001
            logger.error("webhook_store.update_failed", user=user, webhook_id=webhook.id, exc_info=exc)
            return StoreResult.INTERNAL_ERROR
        return StoreResult.SUCCESS

    async def delete_webhook(self, user: str, id: str) -> StoreResult:  # noqa: A002
        _require(user, "user")
        _require(id, "id")
        user = self.normalize_key(user)
        id = self.normalize_key(id)  # noqa: A001

        try:
            async with self._context_factory() as ctx:
                match = await ctx.find_first(RegistrationFilter(user=user, id=id))
                if match is None:
                    return StoreResult.NOT_FOUND
                await ctx.mark_deleted(match)
                await ctx.commit()
        except Exception as exc:  # noqa: BLE001
            logger.error("webhook_store.delete_failed", user=user, webhook_id=id, exc_info=exc)
            return StoreResult.INTERNAL_ERROR
        return StoreResult.SUCCESS

    async def delete_all_webhooks(self, user: str) -> None:
        _require(user, "user")
        user = self.normalize_key(user)

        try:
            async with self._context_factory() as ctx:
                for match in await ctx.find(RegistrationFilter(user=user)):
                    await ctx.mark_deleted(match)
                await ctx.commit()
        except Exception as exc:
            raise WebHookStoreError("delete_all_webhooks", exc) from exc

    def _normalized(self, webhook: WebHook) -> WebHook:
        _require(webhook.id, "webhook.id")
        return self._mapper.with_id(webhook, self.normalize_key(webhook.id))
