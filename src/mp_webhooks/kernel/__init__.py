"""Kernel – framework-agnostic building blocks."""

from mp_webhooks.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    SerializationError,
    ValidationError,
    WebHookStoreError,
)

__all__ = [
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
    "WebHookStoreError",
]
