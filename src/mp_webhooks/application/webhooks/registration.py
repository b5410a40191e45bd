"""Application webhooks – Registration record protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["Registration", "RegistrationFactory"]


@runtime_checkable
class Registration(Protocol):
    """Storage-side shape of one webhook subscription, keyed by ``(user, id)``.

    ``protected_data`` is the encoded :class:`~mp_webhooks.application.webhooks.WebHook`.
    """

    user: str
    id: str
    protected_data: str


class RegistrationFactory(Protocol):
    """Callable building a new, detached registration record.

    ORM model classes accepting keyword arguments satisfy this protocol.
    """

    def __call__(self, *, user: str, id: str, protected_data: str) -> Registration: ...  # noqa: A002
