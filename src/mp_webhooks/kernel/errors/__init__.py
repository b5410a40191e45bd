"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── ConflictError
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── WebHookStoreError
"""

from mp_webhooks.kernel.errors.base import BaseError
from mp_webhooks.kernel.errors.domain import (
    ConflictError,
    DomainError,
    ValidationError,
)
from mp_webhooks.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
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
