"""Shared repository helpers used by concrete persistence classes."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Thin wrapper binding a mapped class to common session queries."""

    def __init__(self, model: type[T]):
        self._model = model

    @property
    def model(self) -> type[T]:
        return self._model

    def add(self, session: Session, instance: T) -> T:
        """Persist a new instance and refresh it with server defaults."""

        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def first_where(self, session: Session, *criteria: Any) -> T | None:
        """Return the first row matching every criterion, or None."""

        stmt = select(self._model).where(*criteria).limit(1)
        return session.execute(stmt).scalar_one_or_none()

    def count(self, session: Session) -> int:
        """Return the number of stored rows."""

        stmt = select(func.count()).select_from(self._model)
        return int(session.execute(stmt).scalar_one())
