"""
Admin endpoints: user management and system statistics.
Requires the stored role of the caller to be admin.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ranch_api.routers._common import get_db, require_admin
from ranch_api.schemas import AdminUserCreate, RoleUpdate, SystemStatsOutput, UserOutput
from ranch_api.services.users import UserService


router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/users", response_model=list[UserOutput])
def list_users(
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin),
) -> list[UserOutput]:
    return UserService(db).list_users()


@router.post("/users", response_model=UserOutput, status_code=status.HTTP_201_CREATED)
def create_user(
    body: AdminUserCreate,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin),
) -> UserOutput:
    """Pre-register a user by identity provider subject."""
    return UserService(db).create_user(body.model_dump())


@router.patch("/users/{user_id}/role", response_model=UserOutput)
def change_user_role(
    user_id: str,
    body: RoleUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin),
) -> UserOutput:
    return UserService(db).change_role(user_id, body.role)


@router.get("/stats", response_model=SystemStatsOutput)
def get_system_stats(
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin),
) -> SystemStatsOutput:
    return UserService(db).system_stats()
