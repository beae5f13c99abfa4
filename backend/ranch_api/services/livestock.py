"""
Livestock services: animals, health records, breeding records.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from ranch_api.models import Animal, BreedingRecord, HealthRecord
from ranch_api.schemas import AnimalOutput, BreedingRecordOutput, HealthRecordOutput
from ranch_api.services.base_service import OwnedCRUDService
from ranch_api.services.predicates import breeding_status
from ranch_shared.config.logging import mask_user_id
from ranch_shared.utils.exceptions import DuplicateEntityError, NotFoundError, ValidationError


class AnimalService(OwnedCRUDService[Animal, AnimalOutput]):
    """Animal registry. tag_id is unique per user."""

    required_fields = frozenset({"tag_id", "species", "gender", "status"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Animal,
            output_schema=AnimalOutput,
            entity_name="Animal",
        )

    def _check_tag_available(self, tag_id: str, user_id: str, exclude_id: int | None = None) -> None:
        criteria = [Animal.tag_id == tag_id]
        if exclude_id is not None:
            criteria.append(Animal.id != exclude_id)
        if self._repo.count(user_id, *criteria):
            raise DuplicateEntityError("Animal", tag_id, user_id=mask_user_id(user_id))

    def _check_parents(self, data: dict[str, Any], user_id: str) -> None:
        for field in ("mother_id", "father_id"):
            parent_id = data.get(field)
            if parent_id is not None and not self._repo.exists(parent_id, user_id):
                raise ValidationError(
                    f"{field} does not reference one of your animals",
                    field=field,
                    value=parent_id,
                )

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        self._check_tag_available(data["tag_id"], user_id)
        self._check_parents(data, user_id)

    def _validate_update(self, entity: Animal, data: dict[str, Any], user_id: str) -> None:
        if "tag_id" in data and data["tag_id"] != entity.tag_id:
            self._check_tag_available(data["tag_id"], user_id, exclude_id=entity.id)
        self._check_parents(data, user_id)


class HealthRecordService(OwnedCRUDService[HealthRecord, HealthRecordOutput]):
    required_fields = frozenset({"type", "date"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=HealthRecord,
            output_schema=HealthRecordOutput,
            entity_name="Health record",
        )

    def default_order(self):
        return [HealthRecord.date.desc(), HealthRecord.id.desc()]

    def _require_animal(self, animal_id: int, user_id: str) -> None:
        if not AnimalService(self._db).repo.exists(animal_id, user_id):
            raise NotFoundError("Animal", animal_id, user_id=mask_user_id(user_id))

    def list_for_animal(self, animal_id: int, user_id: str) -> list[HealthRecordOutput]:
        """Health history of one owned animal, most recent first."""
        self._require_animal(animal_id, user_id)
        return self.list_all(user_id, HealthRecord.animal_id == animal_id)

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        self._require_animal(data["animal_id"], user_id)


class BreedingRecordService(OwnedCRUDService[BreedingRecord, BreedingRecordOutput]):
    """Breeding log. Output carries the derived status."""

    required_fields = frozenset({"mother_id", "breeding_date"})

    def __init__(self, db: Session, today: date | None = None):
        super().__init__(
            db=db,
            model=BreedingRecord,
            output_schema=BreedingRecordOutput,
            entity_name="Breeding record",
        )
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def default_order(self):
        return [BreedingRecord.breeding_date.desc(), BreedingRecord.id.desc()]

    def _check_parents(self, data: dict[str, Any], user_id: str) -> None:
        animals = AnimalService(self._db).repo
        mother_id = data.get("mother_id")
        if mother_id is not None and not animals.exists(mother_id, user_id):
            raise NotFoundError("Animal", mother_id, user_id=mask_user_id(user_id))
        father_id = data.get("father_id")
        if father_id is not None and not animals.exists(father_id, user_id):
            raise NotFoundError("Animal", father_id, user_id=mask_user_id(user_id))

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        self._check_parents(data, user_id)

    def _validate_update(self, entity: BreedingRecord, data: dict[str, Any], user_id: str) -> None:
        self._check_parents(data, user_id)

    def to_output(self, entity: BreedingRecord) -> BreedingRecordOutput:
        return BreedingRecordOutput(
            id=entity.id,
            user_id=entity.user_id,
            mother_id=entity.mother_id,
            father_id=entity.father_id,
            breeding_date=entity.breeding_date,
            expected_birth_date=entity.expected_birth_date,
            actual_birth_date=entity.actual_birth_date,
            notes=entity.notes,
            status=breeding_status(entity, self.today),
            created_at=entity.created_at,
        )
