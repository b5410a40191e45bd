"""Testing fakes – in-memory doubles for kernel ports."""
from mp_webhooks.testing.fakes.registrations import (
    InMemoryRegistration,
    InMemoryRegistrationContext,
    InMemoryRegistrationDatabase,
)

__all__ = [
    "InMemoryRegistration",
    "InMemoryRegistrationContext",
    "InMemoryRegistrationDatabase",
]
