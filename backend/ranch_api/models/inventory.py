"""
Inventory Models: InventoryItem.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ranch_shared.config.constants import Limits

from .base import Base, DecimalString, OwnedMixin, UpdatedAtMixin


class InventoryItem(OwnedMixin, UpdatedAtMixin, Base):
    """
    Stock of feed, medicine, supplies.
    Low stock is derived: quantity <= min_threshold when a threshold is set.
    """

    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.QUANTITY_PRECISION, Limits.QUANTITY_SCALE), nullable=False
    )
    unit: Mapped[str] = mapped_column(String(64), nullable=False)
    cost_per_unit: Mapped[Optional[Decimal]] = mapped_column(DecimalString(10, 2))
    supplier: Mapped[Optional[str]] = mapped_column(String(255))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    expiry_date: Mapped[Optional[date]] = mapped_column(Date)
    min_threshold: Mapped[Optional[Decimal]] = mapped_column(
        DecimalString(Limits.QUANTITY_PRECISION, Limits.QUANTITY_SCALE)
    )
    notes: Mapped[Optional[str]] = mapped_column(Text)
