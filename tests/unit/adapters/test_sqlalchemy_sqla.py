"""Unit tests for the SQLAlchemy adapter (session factory, context, mixin, store).

Uses an in-memory SQLite database via *aiosqlite* — no running server needed.
"""
from __future__ import annotations

import asyncio
import logging

import pytest
import structlog
from sqlalchemy import select
from sqlalchemy.orm import DeclarativeBase

from mp_webhooks.adapters.sqlalchemy import (
    RegistrationMixin,
    SqlAlchemyRegistrationContext,
    SqlAlchemySessionFactory,
    SqlAlchemyWebHookStore,
    create_webhook_store,
)
from mp_webhooks.application.webhooks import StoreResult, WebHook
from mp_webhooks.config.settings import WebHookStoreSettings
from mp_webhooks.kernel.ddd import RegistrationFilter

# ---------------------------------------------------------------------------
# Shared ORM base and test model
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class WebHookRegistration(RegistrationMixin, Base):
    __tablename__ = "webhook_registrations"


_DB_URL = "sqlite+aiosqlite:///:memory:"


async def _make_store() -> SqlAlchemyWebHookStore[WebHookRegistration]:
    store = SqlAlchemyWebHookStore(SqlAlchemySessionFactory(_DB_URL), WebHookRegistration)
    async with store.session_factory.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return store


def _hook(id: str, *filters: str) -> WebHook:  # noqa: A002
    return WebHook(id=id, web_hook_uri=f"https://{id}.example.com", secret="s", filters=set(filters))


# ---------------------------------------------------------------------------
# RegistrationMixin
# ---------------------------------------------------------------------------


class TestRegistrationMixin:
    def test_columns_present_in_table(self) -> None:
        cols = {c.name for c in WebHookRegistration.__table__.columns}
        assert cols == {"user", "id", "protected_data"}

    def test_composite_primary_key(self) -> None:
        pk = [c.name for c in WebHookRegistration.__table__.primary_key.columns]
        assert pk == ["user", "id"]

    def test_repr_omits_payload(self) -> None:
        reg = WebHookRegistration(user="alice", id="w1", protected_data="{}")
        assert repr(reg) == "WebHookRegistration(user='alice', id='w1')"


# ---------------------------------------------------------------------------
# SqlAlchemyRegistrationContext
# ---------------------------------------------------------------------------


class TestRegistrationContext:
    def test_commit_persists_and_find_filters(self) -> None:
        async def run() -> None:
            store = await _make_store()
            sf = store.session_factory

            async with SqlAlchemyRegistrationContext(sf, WebHookRegistration) as ctx:
                await ctx.add(WebHookRegistration(user="alice", id="w1", protected_data="{}"))
                await ctx.add(WebHookRegistration(user="bob", id="w1", protected_data="{}"))
                await ctx.commit()

            async with SqlAlchemyRegistrationContext(sf, WebHookRegistration) as ctx:
                assert len(await ctx.find(RegistrationFilter())) == 2
                only_alice = await ctx.find(RegistrationFilter(user="alice"))
                assert [(r.user, r.id) for r in only_alice] == [("alice", "w1")]
                assert await ctx.find_first(RegistrationFilter(user="carol", id="w1")) is None
            await store.dispose()

        asyncio.run(run())

    def test_uncommitted_changes_are_discarded(self) -> None:
        async def run() -> None:
            store = await _make_store()
            sf = store.session_factory

            async with SqlAlchemyRegistrationContext(sf, WebHookRegistration) as ctx:
                await ctx.add(WebHookRegistration(user="alice", id="w1", protected_data="{}"))

            async with SqlAlchemyRegistrationContext(sf, WebHookRegistration) as ctx:
                assert await ctx.find(RegistrationFilter()) == []
            await store.dispose()

        asyncio.run(run())

    def test_exception_rolls_back_and_closes(self) -> None:
        async def run() -> None:
            store = await _make_store()
            ctx = SqlAlchemyRegistrationContext(store.session_factory, WebHookRegistration)

            with pytest.raises(ValueError):
                async with ctx:
                    await ctx.add(WebHookRegistration(user="alice", id="w1", protected_data="{}"))
                    raise ValueError("oops")
            assert ctx.session is None

            async with store.session_factory() as s:
                rows = (await s.execute(select(WebHookRegistration))).scalars().all()
            assert rows == []
            await store.dispose()

        asyncio.run(run())


# ---------------------------------------------------------------------------
# SqlAlchemyWebHookStore
# ---------------------------------------------------------------------------


class TestSqlAlchemyWebHookStore:
    def test_insert_lookup_delete(self) -> None:
        async def run() -> None:
            store = await _make_store()
            wh = _hook("w1", "ping")
            assert await store.insert_webhook("Alice", wh) is StoreResult.SUCCESS
            assert await store.lookup_webhook("alice", "W1") == wh
            assert await store.delete_webhook("alice", "w1") is StoreResult.SUCCESS
            assert await store.lookup_webhook("alice", "w1") is None
            assert await store.delete_webhook("alice", "w1") is StoreResult.NOT_FOUND
            await store.dispose()

        asyncio.run(run())

    def test_duplicate_insert_is_internal_error(self) -> None:
        async def run() -> None:
            store = await _make_store()
            assert await store.insert_webhook("alice", _hook("w1")) is StoreResult.SUCCESS
            assert await store.insert_webhook("alice", _hook("w1")) is StoreResult.INTERNAL_ERROR
            assert len(await store.get_all_webhooks("alice")) == 1
            await store.dispose()

        asyncio.run(run())

    def test_update_writes_compact_payload(self) -> None:
        async def run() -> None:
            store = await _make_store()
            await store.insert_webhook("alice", _hook("w1", "ping"))
            assert await store.update_webhook("alice", _hook("w1", "push")) is StoreResult.SUCCESS
            assert await store.update_webhook("alice", _hook("w2", "push")) is StoreResult.NOT_FOUND

            async with store.session_factory() as s:
                row = (await s.execute(select(WebHookRegistration))).scalar_one()
            assert (row.user, row.id) == ("alice", "w1")
            assert '"Filters":["push"]' in row.protected_data
            assert " " not in row.protected_data
            await store.dispose()

        asyncio.run(run())

    def test_delete_all_then_get_all_is_empty(self) -> None:
        async def run() -> None:
            store = await _make_store()
            await store.insert_webhook("alice", _hook("w1"))
            await store.insert_webhook("alice", _hook("w2"))
            await store.insert_webhook("bob", _hook("w3"))
            await store.delete_all_webhooks("alice")
            await store.delete_all_webhooks("alice")
            assert await store.get_all_webhooks("alice") == []
            assert [w.id for w in await store.get_all_webhooks("bob")] == ["w3"]
            await store.dispose()

        asyncio.run(run())

    def test_queries_skip_corrupt_rows_and_pass_owner(self) -> None:
        async def run() -> None:
            store = await _make_store()
            await store.insert_webhook("alice", _hook("w1", "ping"))
            await store.insert_webhook("bob", _hook("w2", "ping", "push"))
            async with store.session_factory() as s:
                s.add(WebHookRegistration(user="alice", id="bad", protected_data="{broken"))
                await s.commit()

            assert [w.id for w in await store.get_all_webhooks("alice")] == ["w1"]
            assert [w.id for w in await store.query_webhooks("alice", ["ping"])] == ["w1"]

            owners: dict[str, str] = {}

            def predicate(webhook: WebHook, user: str) -> bool:
                owners[webhook.id] = user
                return True

            result = await store.query_webhooks_across_all_users(["ping"], predicate)
            assert {w.id for w in result} == {"w1", "w2"}
            assert owners == {"w1": "alice", "w2": "bob"}
            await store.dispose()

        asyncio.run(run())

    def test_non_normalized_row_is_listed_but_not_addressable(self) -> None:
        async def run() -> None:
            store = await _make_store()
            async with store.session_factory() as s:
                payload = '{"Id":"W1","WebHookUri":"https://w1.example.com","Filters":["ping"]}'
                s.add(WebHookRegistration(user="alice", id="W1", protected_data=payload))
                await s.commit()

            assert [w.id for w in await store.get_all_webhooks("alice")] == ["W1"]
            assert await store.lookup_webhook("alice", "W1") is None
            assert await store.delete_webhook("alice", "W1") is StoreResult.NOT_FOUND
            await store.dispose()

        asyncio.run(run())


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCreateWebHookStore:
    def test_builds_store_from_settings(self, restore_logging) -> None:
        async def run() -> None:
            settings = WebHookStoreSettings(database_url=_DB_URL)
            store = create_webhook_store(settings, WebHookRegistration)
            assert isinstance(store, SqlAlchemyWebHookStore)
            async with store.session_factory.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            assert await store.insert_webhook("alice", _hook("w1", "ping")) is StoreResult.SUCCESS
            assert [w.id for w in await store.query_webhooks("alice", ["ping"])] == ["w1"]
            await store.dispose()

        asyncio.run(run())

    def test_applies_configured_log_level(self, restore_logging) -> None:
        async def run() -> None:
            settings = WebHookStoreSettings(database_url=_DB_URL, log_level="WARNING")
            store = create_webhook_store(settings, WebHookRegistration)
            assert logging.getLogger().level == logging.WARNING
            await store.dispose()

        asyncio.run(run())
