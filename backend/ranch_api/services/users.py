"""
User services: identity sync, profile, notification settings and the
admin operations on users.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ranch_api.models import Animal, Document, NotificationSettings, Transaction, User
from ranch_api.schemas import NotificationSettingsOutput, SystemStatsOutput, UserOutput
from ranch_shared.config.constants import Roles
from ranch_shared.config.logging import auth_logger as logger, mask_user_id
from ranch_shared.infrastructure.db import safe_commit
from ranch_shared.utils.exceptions import DuplicateEntityError, InsufficientRoleError, NotFoundError


PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


class UserService:
    def __init__(self, db: Session):
        self._db = db

    def get_entity(self, user_id: str) -> User | None:
        return self._db.get(User, user_id)

    def get(self, user_id: str) -> UserOutput:
        user = self.get_entity(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return UserOutput.model_validate(user)

    def sync(self, ctx: dict[str, Any], body: dict[str, Any] | None = None) -> UserOutput:
        """
        Upsert the caller from identity claims.

        Claims from the verified token take precedence over body fields.
        last_login is stamped on every sync.
        """
        user_id = ctx["user_id"]
        body = body or {}
        values = {k: ctx.get(k) or body.get(k) for k in PROFILE_FIELDS}

        user = self.get_entity(user_id)
        if user is None:
            user = User(id=user_id, role=Roles.USER, is_active=True)
            self._db.add(user)
            logger.info("User created from identity token", user_id=mask_user_id(user_id))

        for key, value in values.items():
            if value is not None:
                setattr(user, key, value)
        user.last_login = datetime.now(timezone.utc)

        safe_commit(self._db)
        self._db.refresh(user)
        return UserOutput.model_validate(user)

    def update_profile(self, user_id: str, data: dict[str, Any]) -> UserOutput:
        user = self.get_entity(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        for key, value in data.items():
            if key in ("id", "role", "is_active"):
                continue
            setattr(user, key, value)

        safe_commit(self._db)
        self._db.refresh(user)
        return UserOutput.model_validate(user)

    def is_admin(self, user_id: str) -> bool:
        user = self.get_entity(user_id)
        return user is not None and user.is_active and user.role == Roles.ADMIN

    def require_admin(self, user_id: str) -> None:
        if not self.is_admin(user_id):
            raise InsufficientRoleError([Roles.ADMIN], user_id=mask_user_id(user_id))

    # =========================================================================
    # Notification settings
    # =========================================================================

    def _settings_entity(self, user_id: str) -> NotificationSettings | None:
        return self._db.scalar(
            select(NotificationSettings).where(NotificationSettings.user_id == user_id)
        )

    def get_notification_settings(self, user_id: str) -> NotificationSettingsOutput:
        """Stored preferences, or the defaults when the user never saved any."""
        entity = self._settings_entity(user_id)
        if entity is None:
            entity = NotificationSettings(user_id=user_id)
            self._db.add(entity)
            safe_commit(self._db)
            self._db.refresh(entity)
        return NotificationSettingsOutput.model_validate(entity)

    def update_notification_settings(
        self, user_id: str, data: dict[str, Any]
    ) -> NotificationSettingsOutput:
        entity = self._settings_entity(user_id)
        if entity is None:
            entity = NotificationSettings(user_id=user_id)
            self._db.add(entity)

        for key, value in data.items():
            if value is not None and hasattr(entity, key):
                setattr(entity, key, value)

        safe_commit(self._db)
        self._db.refresh(entity)
        return NotificationSettingsOutput.model_validate(entity)

    # =========================================================================
    # Admin
    # =========================================================================

    def list_users(self) -> list[UserOutput]:
        users = self._db.scalars(select(User).order_by(User.created_at.desc(), User.id)).all()
        return [UserOutput.model_validate(u) for u in users]

    def create_user(self, data: dict[str, Any]) -> UserOutput:
        if self.get_entity(data["id"]) is not None:
            raise DuplicateEntityError("User", data["id"])

        user = User(**data, is_active=True)
        self._db.add(user)
        safe_commit(self._db)
        self._db.refresh(user)
        logger.info("User created by admin", user_id=mask_user_id(user.id), role=user.role)
        return UserOutput.model_validate(user)

    def change_role(self, user_id: str, role: str) -> UserOutput:
        user = self.get_entity(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        user.role = role
        safe_commit(self._db)
        self._db.refresh(user)
        logger.info("User role changed", user_id=mask_user_id(user_id), role=role)
        return UserOutput.model_validate(user)

    def system_stats(self) -> SystemStatsOutput:
        def count(*criteria: Any, model: Any = User) -> int:
            query = select(func.count()).select_from(model)
            if criteria:
                query = query.where(*criteria)
            return self._db.scalar(query) or 0

        return SystemStatsOutput(
            total_users=count(),
            active_users=count(User.is_active.is_(True)),
            admin_users=count(User.role == Roles.ADMIN),
            total_animals=count(model=Animal),
            total_transactions=count(model=Transaction),
            total_documents=count(model=Document),
        )
