"""
User Models: User, UserSession, NotificationSettings.

Users are created lazily from identity provider claims; their id is the
provider's subject string.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ranch_shared.config.constants import Roles

from .base import Base, OwnedMixin, UpdatedAtMixin, utcnow


class User(UpdatedAtMixin, Base):
    """Profile of an authenticated user."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255))
    last_name: Mapped[Optional[str]] = mapped_column(String(255))
    profile_image_url: Mapped[Optional[str]] = mapped_column(String(1024))
    phone: Mapped[Optional[str]] = mapped_column(String(64))
    address: Mapped[Optional[str]] = mapped_column(Text)
    bio: Mapped[Optional[str]] = mapped_column(Text)
    role: Mapped[str] = mapped_column(String(32), default=Roles.USER, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )


class UserSession(Base):
    """
    Session storage owned by the authentication collaborator.
    The API only creates the table.
    """

    __tablename__ = "sessions"

    sid: Mapped[str] = mapped_column(String(255), primary_key=True)
    sess: Mapped[str] = mapped_column(Text, nullable=False)
    expire: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)


class NotificationSettings(OwnedMixin, UpdatedAtMixin, Base):
    """Per-user notification preferences (one row per user)."""

    __tablename__ = "user_notification_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email_notifications: Mapped[bool] = mapped_column(Boolean, default=True)
    push_notifications: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_notifications: Mapped[bool] = mapped_column(Boolean, default=False)
    health_alerts: Mapped[bool] = mapped_column(Boolean, default=True)
    low_stock_alerts: Mapped[bool] = mapped_column(Boolean, default=True)
    weather_alerts: Mapped[bool] = mapped_column(Boolean, default=True)
    maintenance_reminders: Mapped[bool] = mapped_column(Boolean, default=True)
    financial_alerts: Mapped[bool] = mapped_column(Boolean, default=True)
    breeding_reminders: Mapped[bool] = mapped_column(Boolean, default=True)
    system_updates: Mapped[bool] = mapped_column(Boolean, default=False)

    __table_args__ = (
        UniqueConstraint("user_id", name="uq_notification_settings_user"),
    )
