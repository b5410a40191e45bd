"""Application webhooks – WebHook subscription object."""
from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["WILDCARD_FILTER", "WebHook"]

WILDCARD_FILTER = "*"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class WebHook:
    """A webhook subscription registered by a user.

    ``filters`` holds the action tags the subscription listens to; the
    wildcard ``"*"`` subscribes to every action.
    """

    web_hook_uri: str = ""
    secret: str = ""
    id: str = field(default_factory=_new_id)
    description: str | None = None
    is_paused: bool = False
    filters: set[str] = field(default_factory=set)
    headers: dict[str, str] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)

    def matches_action(self, action: str) -> bool:
        action = action.lower()
        return any(f.lower() in (WILDCARD_FILTER, action) for f in self.filters)

    def matches_any_action(self, actions: Iterable[str]) -> bool:
        """Return True if this webhook is active and subscribes to any of *actions*.

        An empty *actions* collection only matches wildcard subscriptions.
        """
        if self.is_paused:
            return False
        if any(f == WILDCARD_FILTER for f in self.filters):
            return True
        return any(self.matches_action(a) for a in actions)
