"""
Livestock endpoints: animals, health records, breeding records.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ranch_api.routers._common import current_user, get_db, get_user_id, updates_from
from ranch_api.schemas import (
    AnimalCreate,
    AnimalOutput,
    AnimalUpdate,
    BreedingRecordCreate,
    BreedingRecordOutput,
    BreedingRecordUpdate,
    HealthRecordCreate,
    HealthRecordOutput,
    HealthRecordUpdate,
)
from ranch_api.services.livestock import AnimalService, BreedingRecordService, HealthRecordService


router = APIRouter(prefix="/api", tags=["livestock"])


# =============================================================================
# Animals
# =============================================================================


@router.get("/animals", response_model=list[AnimalOutput])
def list_animals(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[AnimalOutput]:
    """List the caller's animals, newest first."""
    return AnimalService(db).list_all(get_user_id(user))


@router.get("/animals/{animal_id}", response_model=AnimalOutput)
def get_animal(
    animal_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AnimalOutput:
    return AnimalService(db).get_by_id(animal_id, get_user_id(user))


@router.post("/animals", response_model=AnimalOutput, status_code=status.HTTP_201_CREATED)
def create_animal(
    body: AnimalCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AnimalOutput:
    return AnimalService(db).create(body.model_dump(), get_user_id(user))


@router.put("/animals/{animal_id}", response_model=AnimalOutput)
@router.patch("/animals/{animal_id}", response_model=AnimalOutput)
def update_animal(
    animal_id: int,
    body: AnimalUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AnimalOutput:
    """Partial update: only the fields present in the body change."""
    return AnimalService(db).update(animal_id, updates_from(body), get_user_id(user))


@router.delete("/animals/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_animal(
    animal_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    AnimalService(db).delete(animal_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/animals/{animal_id}/health-records", response_model=list[HealthRecordOutput])
def list_animal_health_records(
    animal_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[HealthRecordOutput]:
    return HealthRecordService(db).list_for_animal(animal_id, get_user_id(user))


# =============================================================================
# Health Records
# =============================================================================


@router.get("/health-records", response_model=list[HealthRecordOutput])
def list_health_records(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[HealthRecordOutput]:
    return HealthRecordService(db).list_all(get_user_id(user))


@router.get("/health-records/{record_id}", response_model=HealthRecordOutput)
def get_health_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> HealthRecordOutput:
    return HealthRecordService(db).get_by_id(record_id, get_user_id(user))


@router.post("/health-records", response_model=HealthRecordOutput, status_code=status.HTTP_201_CREATED)
def create_health_record(
    body: HealthRecordCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> HealthRecordOutput:
    return HealthRecordService(db).create(body.model_dump(), get_user_id(user))


@router.put("/health-records/{record_id}", response_model=HealthRecordOutput)
@router.patch("/health-records/{record_id}", response_model=HealthRecordOutput)
def update_health_record(
    record_id: int,
    body: HealthRecordUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> HealthRecordOutput:
    return HealthRecordService(db).update(record_id, updates_from(body), get_user_id(user))


@router.delete("/health-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_health_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    HealthRecordService(db).delete(record_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Breeding Records
# =============================================================================


@router.get("/breeding-records", response_model=list[BreedingRecordOutput])
def list_breeding_records(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[BreedingRecordOutput]:
    return BreedingRecordService(db).list_all(get_user_id(user))


@router.get("/breeding-records/{record_id}", response_model=BreedingRecordOutput)
def get_breeding_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BreedingRecordOutput:
    return BreedingRecordService(db).get_by_id(record_id, get_user_id(user))


@router.post("/breeding-records", response_model=BreedingRecordOutput, status_code=status.HTTP_201_CREATED)
def create_breeding_record(
    body: BreedingRecordCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BreedingRecordOutput:
    return BreedingRecordService(db).create(body.model_dump(), get_user_id(user))


@router.put("/breeding-records/{record_id}", response_model=BreedingRecordOutput)
@router.patch("/breeding-records/{record_id}", response_model=BreedingRecordOutput)
def update_breeding_record(
    record_id: int,
    body: BreedingRecordUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BreedingRecordOutput:
    return BreedingRecordService(db).update(record_id, updates_from(body), get_user_id(user))


@router.delete("/breeding-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_breeding_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    BreedingRecordService(db).delete(record_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
