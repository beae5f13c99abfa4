"""
Base Service Classes.

Provides base classes for application services that:
- Use OwnedRepository for data access (every query filtered by user_id)
- Convert entities to pydantic output DTOs
- Own the commit of each write

Architecture:
    Router (thin) -> Service (business logic) -> Repository (data access) -> Model

Usage:
    from ranch_api.services.base_service import OwnedCRUDService

    class InventoryService(OwnedCRUDService[InventoryItem, InventoryItemOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                model=InventoryItem,
                output_schema=InventoryItemOutput,
                entity_name="Inventory item",
            )
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ranch_api.models import Base
from ranch_api.repositories.owned import OwnedRepository
from ranch_shared.config.logging import get_logger, mask_user_id
from ranch_shared.infrastructure.db import safe_commit
from ranch_shared.utils.exceptions import ConflictError, NotFoundError, ValidationError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)


class BaseService(Generic[ModelT]):
    """
    Base service for owner-scoped domain operations.

    Subclasses implement specific business logic while this class
    provides common infrastructure (repository access, logging).
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self._db = db
        self._model = model
        self._repo = OwnedRepository(model, db)

    @property
    def db(self) -> Session:
        return self._db

    @property
    def repo(self) -> OwnedRepository[ModelT]:
        return self._repo


class OwnedCRUDService(BaseService[ModelT], Generic[ModelT, OutputT]):
    """
    Base service for user-owned entities with CRUD operations.

    - list: newest first (created_at desc, id desc) unless default_order is set
    - get/update: NotFoundError when the row is missing or owned by another user
    - update: partial merge of the supplied fields
    - delete: idempotent, never raises for a missing row
    """

    # Columns that may not be set to null by a partial update
    required_fields: frozenset[str] = frozenset()

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
    ):
        super().__init__(db, model)
        self._output_schema = output_schema
        self._entity_name = entity_name

    @property
    def entity_name(self) -> str:
        return self._entity_name

    def default_order(self) -> Sequence[Any]:
        return [self._model.created_at.desc(), self._model.id.desc()]

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_entity(self, entity_id: int, user_id: str) -> ModelT:
        """Get raw entity (for internal use). Raises NotFoundError."""
        entity = self._repo.find_by_id(entity_id, user_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id, user_id=mask_user_id(user_id))
        return entity

    def get_by_id(self, entity_id: int, user_id: str) -> OutputT:
        return self.to_output(self.get_entity(entity_id, user_id))

    def list_all(self, user_id: str, *criteria: Any) -> list[OutputT]:
        entities = self._repo.find_all(user_id, *criteria, order_by=self.default_order())
        return [self.to_output(e) for e in entities]

    def count(self, user_id: str, *criteria: Any) -> int:
        return self._repo.count(user_id, *criteria)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, data: dict[str, Any], user_id: str) -> OutputT:
        """
        Create a new entity owned by user_id.

        Returns:
            Output DTO with id and timestamps.

        Raises:
            ValidationError: If data is invalid.
            ConflictError: If a uniqueness rule is violated.
        """
        self._validate_create(data, user_id)

        entity = self._commit_write(lambda: self._repo.create(data, user_id), "create")
        self._db.refresh(entity)

        logger.info(
            f"{self._entity_name} created",
            entity_id=entity.id,
            user_id=mask_user_id(user_id),
        )
        return self.to_output(entity)

    def update(self, entity_id: int, data: dict[str, Any], user_id: str) -> OutputT:
        """
        Merge the supplied fields into an owned entity.

        Raises:
            NotFoundError: If no owned row has this id.
            ValidationError: If a required field is set to null.
        """
        nulled = sorted(k for k in self.required_fields if k in data and data[k] is None)
        if nulled:
            raise ValidationError(
                f"{', '.join(nulled)} cannot be null",
                fields=nulled,
            )

        entity = self.get_entity(entity_id, user_id)
        self._validate_update(entity, data, user_id)

        updated = self._commit_write(lambda: self._repo.update(entity_id, user_id, data), "update")
        if updated is None:
            raise NotFoundError(self._entity_name, entity_id, user_id=mask_user_id(user_id))
        self._db.refresh(updated)
        return self.to_output(updated)

    def delete(self, entity_id: int, user_id: str) -> int:
        """Hard delete; returns the number of rows removed (0 or 1)."""
        removed = self._repo.delete(entity_id, user_id)
        safe_commit(self._db)
        if removed:
            logger.info(
                f"{self._entity_name} deleted",
                entity_id=entity_id,
                user_id=mask_user_id(user_id),
            )
        return removed

    def _commit_write(self, write: Any, operation: str) -> Any:
        try:
            result = write()
            safe_commit(self._db)
        except IntegrityError as e:
            self._db.rollback()
            raise ConflictError(
                f"{self._entity_name} violates a uniqueness rule",
                operation=operation,
                error=str(e.orig),
            )
        return result

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """
        Convert entity to output DTO.

        Override this method for custom transformation logic.
        """
        return self._output_schema.model_validate(entity)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        pass

    def _validate_update(self, entity: ModelT, data: dict[str, Any], user_id: str) -> None:
        pass
