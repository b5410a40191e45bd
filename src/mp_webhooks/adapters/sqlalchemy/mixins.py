"""SQLAlchemy ORM mixins – RegistrationMixin."""
from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column


class RegistrationMixin:
    """Adds the ``user`` / ``id`` / ``protected_data`` registration columns.

    Mix into any concrete ORM model class that extends
    :class:`~sqlalchemy.orm.DeclarativeBase`::

        class WebHookRegistration(RegistrationMixin, Base):
            __tablename__ = "webhook_registrations"

    ``(user, id)`` forms the composite primary key, so inserting a second
    registration with the same key fails at commit time.
    """

    user: Mapped[str] = mapped_column(String(256), primary_key=True)
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    protected_data: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(user={self.user!r}, id={self.id!r})"


__all__ = ["RegistrationMixin"]
