"""SQLAlchemy adapter – session factory, registration context, mixin, store."""
from mp_webhooks.adapters.sqlalchemy.context import SqlAlchemyRegistrationContext
from mp_webhooks.adapters.sqlalchemy.mixins import RegistrationMixin
from mp_webhooks.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_webhooks.adapters.sqlalchemy.store import SqlAlchemyWebHookStore, create_webhook_store

__all__ = [
    "RegistrationMixin",
    "SqlAlchemyRegistrationContext",
    "SqlAlchemySessionFactory",
    "SqlAlchemyWebHookStore",
    "create_webhook_store",
]
