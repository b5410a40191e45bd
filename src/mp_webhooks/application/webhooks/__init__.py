"""Application webhooks – subscription model, encoding and stores."""
from mp_webhooks.application.webhooks.codec import JsonWebHookCodec, RegistrationMapper, WebHookCodec
from mp_webhooks.application.webhooks.db_store import DbWebHookStore
from mp_webhooks.application.webhooks.registration import Registration, RegistrationFactory
from mp_webhooks.application.webhooks.result import StoreResult
from mp_webhooks.application.webhooks.store import WebHookPredicate, WebHookStore
from mp_webhooks.application.webhooks.webhook import WILDCARD_FILTER, WebHook

__all__ = [
    "DbWebHookStore",
    "JsonWebHookCodec",
    "Registration",
    "RegistrationFactory",
    "RegistrationMapper",
    "StoreResult",
    "WILDCARD_FILTER",
    "WebHook",
    "WebHookCodec",
    "WebHookPredicate",
    "WebHookStore",
]
