"""Domain errors — argument and state rule violations."""

from __future__ import annotations

from typing import Any

from mp_webhooks.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument is missing or does not meet validation rules.

    ``field`` names the offending argument when there is a single one.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    @classmethod
    def required(cls, field: str) -> "ValidationError":
        return cls(f"'{field}' is required", field=field)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["field"] = self.field
        return base


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "ValidationError",
]
