"""Testing support – in-memory persistence fakes.

Build a store without a database::

    db = InMemoryRegistrationDatabase()
    store = DbWebHookStore(db, RegistrationMapper(InMemoryRegistration))
"""

from mp_webhooks.testing.fakes import (
    InMemoryRegistration,
    InMemoryRegistrationContext,
    InMemoryRegistrationDatabase,
)

__all__ = [
    "InMemoryRegistration",
    "InMemoryRegistrationContext",
    "InMemoryRegistrationDatabase",
]
