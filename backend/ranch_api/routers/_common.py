"""
Shared dependencies and helpers for routers.
"""

from typing import Any

from fastapi import Depends
from sqlalchemy.orm import Session

from ranch_api.services.users import UserService
from ranch_shared.infrastructure.db import get_db
from ranch_shared.security.auth import current_user_context as current_user


def get_user_id(user: dict[str, Any]) -> str:
    """Owner id of the request (identity provider subject)."""
    return user["user_id"]


def require_admin(
    user: dict = Depends(current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Dependency that requires the stored user role to be admin."""
    UserService(db).require_admin(get_user_id(user))
    return user


def updates_from(body: Any) -> dict[str, Any]:
    """Fields explicitly present in a partial-update body."""
    return body.model_dump(exclude_unset=True)


__all__ = ["current_user", "get_db", "get_user_id", "require_admin", "updates_from"]
