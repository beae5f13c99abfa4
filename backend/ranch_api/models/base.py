"""
Base class, mixins and portable column types for all SQLAlchemy ORM models.

Column types are limited to what PostgreSQL, MySQL and SQLite all handle
the same way: strings, text, dates, timestamps, integers and booleans.
Decimals are stored as strings (DecimalString) and lists as JSON text
(StringList).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from ranch_shared.utils.money import to_decimal


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DecimalString(TypeDecorator):
    """
    Fixed-precision decimal persisted as its canonical string.

    Values are quantized to `scale` places on the way in and come back as
    Decimal, so every backend round-trips them exactly.
    """

    impl = String
    cache_ok = True

    def __init__(self, precision: int = 12, scale: int = 2, **kwargs: Any):
        self.precision = precision
        self.scale = scale
        # digits + sign + decimal point
        super().__init__(length=precision + 2, **kwargs)

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        return format(to_decimal(value, self.scale), "f")

    def process_result_value(self, value: Any, dialect: Any) -> Optional[Decimal]:
        if value is None:
            return None
        return to_decimal(value, self.scale)


class StringList(TypeDecorator):
    """List of strings stored as JSON text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        return json.dumps([str(v) for v in value])

    def process_result_value(self, value: Any, dialect: Any) -> Optional[list[str]]:
        if value is None or value == "":
            return None
        return json.loads(value)


class Base(DeclarativeBase):
    """Base class for all models."""

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        id_val = getattr(self, "id", None)
        return f"<{class_name}(id={id_val})>"


class OwnedMixin:
    """
    Ownership and creation timestamp for every user-owned entity.

    Every read and write of an owned table is filtered by user_id
    (see ranch_api.repositories.owned).
    """

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )


class UpdatedAtMixin:
    """updated_at is re-stamped on every ORM update."""

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=True
    )
