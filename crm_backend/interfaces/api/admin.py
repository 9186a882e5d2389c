"""Admin API routes — user provisioning (admin role only)."""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from crm_backend.application.services.security import PasswordHasher
from crm_backend.application.services.user_service import create_user, list_users
from crm_backend.core.exceptions import InternalServerError
from crm_backend.domain.models.user import User
from crm_backend.domain.repositories.user_repository import UserRepository
from crm_backend.domain.schemas.admin import (
    UserCreateRequest,
    UserCreateResponse,
    UserListResponse,
    UserRead,
)
from crm_backend.domain.schemas.auth import UserPublic
from crm_backend.interfaces.api.deps import require_admin
from crm_backend.interfaces.deps import get_password_hasher, get_user_repository

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("/users", response_model=UserCreateResponse)
def admin_create_user(
    body: UserCreateRequest,
    admin: User = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    try:
        user = create_user(
            users,
            hasher,
            email=body.email,
            display_name=body.display_name,
            password=body.password,
            role=body.role,
        )
    except SQLAlchemyError:
        logger.exception("User creation failed", admin_id=admin.id)
        raise InternalServerError("Failed to create user")

    return UserCreateResponse(user=UserPublic.model_validate(user))


@router.get("/users", response_model=UserListResponse)
def admin_list_users(
    admin: User = Depends(require_admin),
    users: UserRepository = Depends(get_user_repository),
):
    try:
        rows = list_users(users)
    except SQLAlchemyError:
        logger.exception("User listing failed", admin_id=admin.id)
        raise InternalServerError("Failed to fetch users")

    return UserListResponse(users=[UserRead.model_validate(u) for u in rows])
