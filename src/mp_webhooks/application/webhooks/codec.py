"""Application webhooks – WebHook encoding and registration mapping.

``protected_data`` holds a compact JSON document whose keys follow the
established wire names (``Id``, ``WebHookUri``, ``Filters`` …). Keys are
matched case-insensitively on decode, and unknown keys are ignored, so rows
written by other producers of the same format stay readable.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from mp_webhooks.application.webhooks.registration import Registration, RegistrationFactory
from mp_webhooks.application.webhooks.webhook import WebHook
from mp_webhooks.kernel.errors import SerializationError
from mp_webhooks.observability.logging import get_logger

__all__ = ["JsonWebHookCodec", "RegistrationMapper", "WebHookCodec"]

logger = get_logger(__name__)

TRegistration = TypeVar("TRegistration", bound=Registration)

_FIELDS: tuple[tuple[str, str], ...] = (
    ("Id", "id"),
    ("WebHookUri", "web_hook_uri"),
    ("Secret", "secret"),
    ("Description", "description"),
    ("IsPaused", "is_paused"),
    ("Filters", "filters"),
    ("Headers", "headers"),
    ("Properties", "properties"),
)


@runtime_checkable
class WebHookCodec(Protocol):
    """Port: turn a WebHook into the ``protected_data`` string and back."""

    def encode(self, webhook: WebHook) -> str: ...
    def decode(self, data: str) -> WebHook: ...


def _sorted_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _sorted_keys(value[k]) for k in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sorted_keys(v) for v in value]
    return value


class JsonWebHookCodec:
    """Compact, deterministic JSON codec for :class:`WebHook`."""

    def encode(self, webhook: WebHook) -> str:
        try:
            doc: dict[str, Any] = {}
            for wire, attr in _FIELDS:
                value = getattr(webhook, attr)
                if attr == "filters":
                    value = sorted(value)
                elif attr in ("headers", "properties"):
                    value = _sorted_keys(value)
                doc[wire] = value
            return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode WebHook '{webhook.id}': {exc}",
                payload_type=WebHook.__name__,
                cause=exc,
            ) from exc

    def decode(self, data: str) -> WebHook:
        try:
            raw = json.loads(data)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Invalid WebHook payload: {exc}", payload_type=WebHook.__name__, cause=exc
            ) from exc
        if not isinstance(raw, dict):
            raise SerializationError(
                f"WebHook payload must be a JSON object, got {type(raw).__name__}",
                payload_type=WebHook.__name__,
            )

        lowered = {str(k).lower(): v for k, v in raw.items()}
        kwargs: dict[str, Any] = {}
        for wire, attr in _FIELDS:
            value = lowered.get(wire.lower())
            if value is not None:
                kwargs[attr] = value

        if not isinstance(kwargs.get("id"), str) or not kwargs["id"]:
            raise SerializationError("WebHook payload has no 'Id'", payload_type=WebHook.__name__)
        filters = kwargs.get("filters", [])
        if not isinstance(filters, list) or not all(isinstance(f, str) for f in filters):
            raise SerializationError("WebHook 'Filters' must be a list of strings", payload_type=WebHook.__name__)
        kwargs["filters"] = set(filters)
        for attr in ("headers", "properties"):
            if not isinstance(kwargs.get(attr, {}), dict):
                raise SerializationError(f"WebHook '{attr}' must be an object", payload_type=WebHook.__name__)
        if not isinstance(kwargs.get("is_paused", False), bool):
            raise SerializationError("WebHook 'IsPaused' must be a boolean", payload_type=WebHook.__name__)
        return WebHook(**kwargs)


class RegistrationMapper(Generic[TRegistration]):
    """Converts between registration records and :class:`WebHook` objects.

    Subclass or replace this strategy to change how ``protected_data`` is
    produced, e.g. to wrap the codec output in an encryption envelope.

    Args:
        registration_factory: Builds a new record, typically the ORM model class.
        codec: Encoding used for ``protected_data``; compact JSON by default.
    """

    def __init__(
        self,
        registration_factory: RegistrationFactory,
        codec: WebHookCodec | None = None,
    ) -> None:
        self._factory = registration_factory
        self._codec = codec or JsonWebHookCodec()

    def to_domain(self, registration: TRegistration | None) -> WebHook | None:
        """Decode *registration*; return ``None`` if it cannot be decoded."""
        if registration is None:
            return None
        try:
            return self._codec.decode(registration.protected_data)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "webhook_store.decode_failed",
                user=registration.user,
                webhook_id=registration.id,
                error=repr(exc),
            )
            return None

    def to_persisted(self, user: str, webhook: WebHook) -> TRegistration:
        return self._factory(  # type: ignore[return-value]
            user=user,
            id=webhook.id,
            protected_data=self._codec.encode(webhook),
        )

    def apply_to_existing(self, user: str, webhook: WebHook, registration: TRegistration) -> None:
        registration.user = user
        registration.id = webhook.id
        registration.protected_data = self._codec.encode(webhook)

    def with_id(self, webhook: WebHook, id: str) -> WebHook:  # noqa: A002
        """Return a copy of *webhook* carrying *id*; the original is left untouched."""
        return dataclasses.replace(webhook, id=id)
