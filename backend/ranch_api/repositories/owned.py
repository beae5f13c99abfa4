"""
Owner-scoped repository.

Every statement built here starts from a `user_id == :user_id` filter, so
rows belonging to another user can never be read, changed or deleted
through it.

Usage:
    from ranch_api.repositories.owned import OwnedRepository

    repo = OwnedRepository(Animal, db)
    animals = repo.find_all(user_id, order_by=[Animal.created_at.desc(), Animal.id.desc()])
    animal = repo.find_by_id(42, user_id)
    repo.update(42, user_id, {"name": "Bessie"})
    repo.delete(42, user_id)
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete as sql_delete, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from ranch_api.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class OwnedRepository(Generic[ModelT]):
    """
    Repository with automatic per-user isolation.

    The model must have a `user_id` column. Writes are flushed, not
    committed; the calling service owns the commit.
    """

    def __init__(self, model: type[ModelT], session: Session):
        if not hasattr(model, "user_id"):
            raise AttributeError(
                f"Model {model.__name__} does not have user_id column."
            )
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        return self._model

    @property
    def session(self) -> Session:
        return self._session

    def _owner_query(self, user_id: str) -> Select:
        """Create user-filtered base query."""
        return select(self._model).where(self._model.user_id == user_id)

    def find_by_id(self, entity_id: int, user_id: str) -> ModelT | None:
        """
        Find entity by ID within the user's scope.

        Returns:
            Entity or None if not found or owned by someone else.
        """
        query = self._owner_query(user_id).where(self._model.id == entity_id)
        return self._session.scalar(query)

    def find_all(
        self,
        user_id: str,
        *criteria: Any,
        order_by: Sequence[Any] | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[ModelT]:
        """
        Find all entities of the user matching optional extra criteria.

        Args:
            user_id: Owner of the rows.
            criteria: Extra WHERE clauses, ANDed with the owner filter.
            order_by: Order expressions.
            limit: Maximum results.
            offset: Skip count.
        """
        query = self._owner_query(user_id)
        if criteria:
            query = query.where(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        return self._session.scalars(query).all()

    def count(self, user_id: str, *criteria: Any) -> int:
        query = (
            select(func.count())
            .select_from(self._model)
            .where(self._model.user_id == user_id)
        )
        if criteria:
            query = query.where(*criteria)
        return self._session.scalar(query) or 0

    def exists(self, entity_id: int, user_id: str) -> bool:
        return self.count(user_id, self._model.id == entity_id) > 0

    def create(self, data: dict[str, Any], user_id: str) -> ModelT:
        """Insert a row owned by user_id. Any user_id in data is ignored."""
        values = {k: v for k, v in data.items() if k != "user_id"}
        entity = self._model(**values, user_id=user_id)
        self._session.add(entity)
        self._session.flush()
        return entity

    def update(self, entity_id: int, user_id: str, data: dict[str, Any]) -> ModelT | None:
        """
        Merge the supplied fields into the owned row.

        Returns:
            The updated entity, or None when no owned row has this id.
        """
        entity = self.find_by_id(entity_id, user_id)
        if entity is None:
            return None

        for key, value in data.items():
            if key in ("id", "user_id", "created_at"):
                continue
            if hasattr(entity, key):
                setattr(entity, key, value)

        self._session.flush()
        return entity

    def delete(self, entity_id: int, user_id: str) -> int:
        """
        Hard delete scoped to id + user_id.

        Returns:
            Number of rows removed (0 when the row is missing or not owned).
        """
        stmt = sql_delete(self._model).where(
            self._model.id == entity_id,
            self._model.user_id == user_id,
        )
        result = self._session.execute(stmt)
        return result.rowcount or 0
