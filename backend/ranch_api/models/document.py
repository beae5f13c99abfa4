"""
Document Models: Document.

Only metadata is stored; the file itself lives at file_url.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, OwnedMixin, StringList


class Document(OwnedMixin, Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    file_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[Optional[int]] = mapped_column(Integer)
    mime_type: Mapped[Optional[str]] = mapped_column(String(255))
    tags: Mapped[Optional[list[str]]] = mapped_column(StringList)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    expiry_date: Mapped[Optional[date]] = mapped_column(Date)
    reminder_date: Mapped[Optional[date]] = mapped_column(Date)
    related_entity_type: Mapped[Optional[str]] = mapped_column(String(64))
    related_entity_id: Mapped[Optional[int]] = mapped_column(Integer)
    uploaded_by: Mapped[Optional[str]] = mapped_column(String(255))
