"""Infrastructure errors — persistence and encoding failures."""

from __future__ import annotations

from typing import Any

from mp_webhooks.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class WebHookStoreError(InfrastructureError):
    """A read operation against the registration store failed.

    The original exception is available as ``cause`` (and ``__cause__``).
    """

    default_code = "webhook_store_error"

    def __init__(
        self,
        operation: str,
        cause: BaseException,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"{operation} failed. Exception: {cause}", cause=cause, **kwargs)
        self.operation = operation


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "WebHookStoreError",
]
