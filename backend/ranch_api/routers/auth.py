"""
Identity sync, profile and notification settings endpoints.
"""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ranch_api.routers._common import current_user, get_db, get_user_id, updates_from
from ranch_api.schemas import (
    NotificationSettingsOutput,
    NotificationSettingsUpdate,
    ProfileUpdate,
    UserOutput,
    UserSyncRequest,
)
from ranch_api.services.users import UserService


router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/auth/sync", response_model=UserOutput)
def sync_user(
    body: UserSyncRequest | None = Body(default=None),
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> UserOutput:
    """Create or refresh the caller's user row from the identity token."""
    return UserService(db).sync(user, body.model_dump(exclude_unset=True) if body else None)


@router.get("/auth/user", response_model=UserOutput)
def get_current_user(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> UserOutput:
    return UserService(db).get(get_user_id(user))


@router.patch("/profile", response_model=UserOutput)
def update_profile(
    body: ProfileUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> UserOutput:
    return UserService(db).update_profile(get_user_id(user), updates_from(body))


@router.get("/notifications/settings", response_model=NotificationSettingsOutput)
def get_notification_settings(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> NotificationSettingsOutput:
    return UserService(db).get_notification_settings(get_user_id(user))


@router.patch("/notifications/settings", response_model=NotificationSettingsOutput)
def update_notification_settings(
    body: NotificationSettingsUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> NotificationSettingsOutput:
    return UserService(db).update_notification_settings(get_user_id(user), updates_from(body))
