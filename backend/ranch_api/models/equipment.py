"""
Equipment Models: Equipment, MaintenanceRecord.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ranch_shared.config.constants import EquipmentStatus, Limits

from .base import Base, DecimalString, OwnedMixin, UpdatedAtMixin


class Equipment(OwnedMixin, UpdatedAtMixin, Base):
    """Machinery and tools."""

    __tablename__ = "equipment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[Optional[str]] = mapped_column(String(255))
    manufacturer: Mapped[Optional[str]] = mapped_column(String(255))
    serial_number: Mapped[Optional[str]] = mapped_column(String(255))
    purchase_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    purchase_price: Mapped[Optional[Decimal]] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE)
    )
    current_value: Mapped[Optional[Decimal]] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE)
    )
    warranty_expiry: Mapped[Optional[datetime.date]] = mapped_column(Date)
    status: Mapped[str] = mapped_column(
        String(32), default=EquipmentStatus.OPERATIONAL, nullable=False
    )
    location: Mapped[Optional[str]] = mapped_column(String(255))
    notes: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (
        Index("ix_equipment_user_status", "user_id", "status"),
    )


class MaintenanceRecord(OwnedMixin, Base):
    """Service performed on one piece of equipment."""

    __tablename__ = "maintenance_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    equipment_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    cost: Mapped[Optional[Decimal]] = mapped_column(DecimalString(10, 2))
    performed_by: Mapped[Optional[str]] = mapped_column(String(255))
    next_maintenance_date: Mapped[Optional[datetime.date]] = mapped_column(Date)
    notes: Mapped[Optional[str]] = mapped_column(Text)
