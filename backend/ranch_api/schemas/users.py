"""
User, profile, notification settings, admin and dashboard schemas.
"""

import datetime

from pydantic import BaseModel, EmailStr, Field

from ranch_api.schemas.common import LongText, MoneyOut, Role, ShortText


# =============================================================================
# Users and Profile
# =============================================================================


class UserOutput(BaseModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    phone: str | None = None
    address: str | None = None
    bio: str | None = None
    role: str
    is_active: bool
    last_login: datetime.datetime | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


class UserSyncRequest(BaseModel):
    """Profile fields sent by the client after sign-in; token claims win when present."""

    email: EmailStr | None = None
    first_name: ShortText | None = None
    last_name: ShortText | None = None
    profile_image_url: ShortText | None = None


class ProfileUpdate(BaseModel):
    first_name: ShortText | None = None
    last_name: ShortText | None = None
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=64)
    address: LongText | None = None
    bio: LongText | None = None
    profile_image_url: ShortText | None = None


class NotificationSettingsUpdate(BaseModel):
    email_notifications: bool | None = None
    push_notifications: bool | None = None
    sms_notifications: bool | None = None
    health_alerts: bool | None = None
    low_stock_alerts: bool | None = None
    weather_alerts: bool | None = None
    maintenance_reminders: bool | None = None
    financial_alerts: bool | None = None
    breeding_reminders: bool | None = None
    system_updates: bool | None = None


class NotificationSettingsOutput(BaseModel):
    user_id: str
    email_notifications: bool
    push_notifications: bool
    sms_notifications: bool
    health_alerts: bool
    low_stock_alerts: bool
    weather_alerts: bool
    maintenance_reminders: bool
    financial_alerts: bool
    breeding_reminders: bool
    system_updates: bool

    class Config:
        from_attributes = True


# =============================================================================
# Admin
# =============================================================================


class AdminUserCreate(BaseModel):
    id: str = Field(min_length=1, max_length=255, description="Identity provider subject")
    email: EmailStr | None = None
    first_name: ShortText | None = None
    last_name: ShortText | None = None
    role: Role = "user"


class RoleUpdate(BaseModel):
    role: Role


class SystemStatsOutput(BaseModel):
    total_users: int
    active_users: int
    admin_users: int
    total_animals: int
    total_transactions: int
    total_documents: int


# =============================================================================
# Dashboard
# =============================================================================


class DashboardStatsOutput(BaseModel):
    total_animals: int
    health_alerts: int
    low_stock_items: int
    equipment_issues: int
    monthly_revenue: MoneyOut
    monthly_expenses: MoneyOut
