"""DDD building blocks — public re-export surface."""

from mp_webhooks.kernel.ddd.specification import RegistrationFilter, Specification
from mp_webhooks.kernel.ddd.unit_of_work import RegistrationContext

__all__ = [
    "RegistrationContext",
    "RegistrationFilter",
    "Specification",
]
