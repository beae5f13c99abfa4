"""
Livestock Models: Animal, HealthRecord, BreedingRecord.

Animal references (mother_id, father_id, animal_id) are plain integer
columns; ownership of the referenced animal is checked by the services.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ranch_shared.config.constants import AnimalStatus, Limits

from .base import Base, DecimalString, OwnedMixin, UpdatedAtMixin


class Animal(OwnedMixin, UpdatedAtMixin, Base):
    """
    One animal in a user's registry.
    Inherits: user_id, created_at from OwnedMixin; updated_at from UpdatedAtMixin.
    """

    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tag_id: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255))
    species: Mapped[str] = mapped_column(String(255), nullable=False)
    breed: Mapped[Optional[str]] = mapped_column(String(255))
    gender: Mapped[str] = mapped_column(String(32), nullable=False)
    birth_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    current_weight: Mapped[Optional[Decimal]] = mapped_column(
        DecimalString(Limits.WEIGHT_PRECISION, Limits.WEIGHT_SCALE)
    )
    birth_weight: Mapped[Optional[Decimal]] = mapped_column(
        DecimalString(Limits.WEIGHT_PRECISION, Limits.WEIGHT_SCALE)
    )
    color: Mapped[Optional[str]] = mapped_column(String(255))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(32), default=AnimalStatus.ACTIVE, nullable=False)
    purchase_price: Mapped[Optional[Decimal]] = mapped_column(DecimalString(10, 2))
    purchase_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    sale_price: Mapped[Optional[Decimal]] = mapped_column(DecimalString(10, 2))
    sale_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    mother_id: Mapped[Optional[int]] = mapped_column(Integer)
    father_id: Mapped[Optional[int]] = mapped_column(Integer)
    genetic_info: Mapped[Optional[str]] = mapped_column(Text)
    registration_number: Mapped[Optional[str]] = mapped_column(String(255))
    microchip_id: Mapped[Optional[str]] = mapped_column(String(255))
    notes: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (
        UniqueConstraint("user_id", "tag_id", name="uq_animal_user_tag"),
        Index("ix_animal_user_status", "user_id", "status"),
    )


class HealthRecord(OwnedMixin, Base):
    """Vaccination, treatment, checkup, deworming or test for one animal."""

    __tablename__ = "health_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    animal_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    veterinarian: Mapped[Optional[str]] = mapped_column(String(255))
    cost: Mapped[Optional[Decimal]] = mapped_column(DecimalString(10, 2))
    next_due_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class BreedingRecord(OwnedMixin, Base):
    """
    Breeding event. Status (pregnant, overdue, born) is derived from the
    dates at read time and never stored.
    """

    __tablename__ = "breeding_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mother_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    father_id: Mapped[Optional[int]] = mapped_column(Integer)
    breeding_date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    expected_birth_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    actual_birth_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    notes: Mapped[Optional[str]] = mapped_column(Text)
