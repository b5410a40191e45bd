"""Application webhooks – StoreResult."""
from __future__ import annotations

from enum import Enum

__all__ = ["StoreResult"]


class StoreResult(str, Enum):
    """Outcome of a write operation on a webhook store.

    ``CONFLICT`` is reserved; duplicate inserts currently surface as
    ``INTERNAL_ERROR``.
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"
