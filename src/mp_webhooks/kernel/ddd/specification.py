"""Specification pattern — record predicates usable in memory and in SQL."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Specification(abc.ABC, Generic[T]):
    """Abstract base for record predicates.

    A specification must be evaluable against a loaded candidate
    (``is_satisfied_by``) and expressible as plain column equality
    (``criteria``) so that persistence contexts can push it down to the
    database instead of filtering rows in Python.
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abc.abstractmethod
    def criteria(self) -> dict[str, Any]: ...


@dataclasses.dataclass(frozen=True)
class RegistrationFilter(Specification[Any]):
    """Equality filter on the ``(user, id)`` key of a registration.

    ``None`` means "any value". ``RegistrationFilter()`` matches every
    registration regardless of owner.

    Example::

        RegistrationFilter(user="alice")            # all of alice's rows
        RegistrationFilter(user="alice", id="w1")   # a single row
    """

    user: str | None = None
    id: str | None = None

    def criteria(self) -> dict[str, Any]:
        return {k: v for k, v in (("user", self.user), ("id", self.id)) if v is not None}

    def is_satisfied_by(self, candidate: Any) -> bool:
        return all(getattr(candidate, k) == v for k, v in self.criteria().items())


__all__ = ["RegistrationFilter", "Specification"]
