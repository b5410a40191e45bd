"""SQLAlchemy adapter – SqlAlchemyWebHookStore and create_webhook_store."""
from __future__ import annotations

from typing import Generic, TypeVar

from mp_webhooks.adapters.sqlalchemy.context import SqlAlchemyRegistrationContext
from mp_webhooks.adapters.sqlalchemy.mixins import RegistrationMixin
from mp_webhooks.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_webhooks.application.webhooks import DbWebHookStore, RegistrationMapper, WebHookCodec
from mp_webhooks.config.settings import WebHookStoreSettings
from mp_webhooks.observability.logging import JsonLoggerFactory, get_logger

TModel = TypeVar("TModel", bound=RegistrationMixin)

logger = get_logger(__name__)


class SqlAlchemyWebHookStore(DbWebHookStore[TModel], Generic[TModel]):
    """:class:`DbWebHookStore` whose contexts are SQLAlchemy sessions on *model*."""

    def __init__(
        self,
        session_factory: SqlAlchemySessionFactory,
        model: type[TModel],
        *,
        codec: WebHookCodec | None = None,
    ) -> None:
        super().__init__(
            context_factory=lambda: SqlAlchemyRegistrationContext(session_factory, model),
            mapper=RegistrationMapper(model, codec),
        )
        self.session_factory = session_factory
        self.model = model

    async def dispose(self) -> None:
        await self.session_factory.dispose()


def create_webhook_store(
    settings: WebHookStoreSettings,
    model: type[TModel],
    *,
    codec: WebHookCodec | None = None,
) -> SqlAlchemyWebHookStore[TModel]:
    """Build a SQLAlchemy-backed store from *settings*.

    Configures JSON logging at ``settings.log_level`` before the engine is
    created.

    The caller owns the returned store's engine and should ``await
    store.dispose()`` on shutdown.
    """
    JsonLoggerFactory.configure(settings.log_level_value)
    session_factory = SqlAlchemySessionFactory(
        settings.database_url,
        echo=settings.echo,
        pool_pre_ping=settings.pool_pre_ping,
    )
    logger.info("webhook_store.created", table=model.__tablename__, dialect=session_factory.engine.dialect.name)  # type: ignore[attr-defined]
    return SqlAlchemyWebHookStore(session_factory, model, codec=codec)


__all__ = ["SqlAlchemyWebHookStore", "create_webhook_store"]
