"""
Livestock schemas: animals, health records, breeding records.
"""

import datetime

from pydantic import BaseModel, Field

from ranch_api.schemas.common import (
    AnimalStatus,
    BreedingStatus,
    HealthRecordType,
    LongText,
    MoneyOut,
    Name,
    ShortText,
    SmallMoney,
    Weight,
)


# =============================================================================
# Animals
# =============================================================================


class AnimalCreate(BaseModel):
    tag_id: Name
    name: ShortText | None = None
    species: Name
    breed: ShortText | None = None
    gender: Name
    birth_date: datetime.date | None = None
    current_weight: Weight | None = None
    birth_weight: Weight | None = None
    color: ShortText | None = None
    location: ShortText | None = None
    status: AnimalStatus = "active"
    purchase_price: SmallMoney | None = None
    purchase_date: datetime.date | None = None
    sale_price: SmallMoney | None = None
    sale_date: datetime.date | None = None
    mother_id: int | None = None
    father_id: int | None = None
    genetic_info: LongText | None = None
    registration_number: ShortText | None = None
    microchip_id: ShortText | None = None
    notes: LongText | None = None


class AnimalUpdate(BaseModel):
    """Partial update: only fields present in the body change."""

    tag_id: Name | None = None
    name: ShortText | None = None
    species: Name | None = None
    breed: ShortText | None = None
    gender: Name | None = None
    birth_date: datetime.date | None = None
    current_weight: Weight | None = None
    birth_weight: Weight | None = None
    color: ShortText | None = None
    location: ShortText | None = None
    status: AnimalStatus | None = None
    purchase_price: SmallMoney | None = None
    purchase_date: datetime.date | None = None
    sale_price: SmallMoney | None = None
    sale_date: datetime.date | None = None
    mother_id: int | None = None
    father_id: int | None = None
    genetic_info: LongText | None = None
    registration_number: ShortText | None = None
    microchip_id: ShortText | None = None
    notes: LongText | None = None


class AnimalOutput(BaseModel):
    id: int
    user_id: str
    tag_id: str
    name: str | None = None
    species: str
    breed: str | None = None
    gender: str
    birth_date: datetime.date | None = None
    current_weight: MoneyOut | None = None
    birth_weight: MoneyOut | None = None
    color: str | None = None
    location: str | None = None
    status: str
    purchase_price: MoneyOut | None = None
    purchase_date: datetime.date | None = None
    sale_price: MoneyOut | None = None
    sale_date: datetime.date | None = None
    mother_id: int | None = None
    father_id: int | None = None
    genetic_info: str | None = None
    registration_number: str | None = None
    microchip_id: str | None = None
    notes: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


# =============================================================================
# Health Records
# =============================================================================


class HealthRecordCreate(BaseModel):
    animal_id: int
    type: HealthRecordType
    description: LongText | None = None
    date: datetime.date
    veterinarian: ShortText | None = None
    cost: SmallMoney | None = None
    next_due_date: datetime.date | None = None
    notes: LongText | None = None


class HealthRecordUpdate(BaseModel):
    type: HealthRecordType | None = None
    description: LongText | None = None
    date: datetime.date | None = None
    veterinarian: ShortText | None = None
    cost: SmallMoney | None = None
    next_due_date: datetime.date | None = None
    notes: LongText | None = None


class HealthRecordOutput(BaseModel):
    id: int
    user_id: str
    animal_id: int
    type: str
    description: str | None = None
    date: datetime.date
    veterinarian: str | None = None
    cost: MoneyOut | None = None
    next_due_date: datetime.date | None = None
    notes: str | None = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


# =============================================================================
# Breeding Records
# =============================================================================


class BreedingRecordCreate(BaseModel):
    mother_id: int
    father_id: int | None = None
    breeding_date: datetime.date
    expected_birth_date: datetime.date | None = None
    actual_birth_date: datetime.date | None = None
    notes: LongText | None = None


class BreedingRecordUpdate(BaseModel):
    mother_id: int | None = None
    father_id: int | None = None
    breeding_date: datetime.date | None = None
    expected_birth_date: datetime.date | None = None
    actual_birth_date: datetime.date | None = None
    notes: LongText | None = None


class BreedingRecordOutput(BaseModel):
    id: int
    user_id: str
    mother_id: int
    father_id: int | None = None
    breeding_date: datetime.date
    expected_birth_date: datetime.date | None = None
    actual_birth_date: datetime.date | None = None
    notes: str | None = None
    status: BreedingStatus = Field(description="Derived from the record's dates")
    created_at: datetime.datetime

    class Config:
        from_attributes = True
