"""Pydantic schemas for admin user management."""

from datetime import datetime
from typing import Optional

from crm_backend.domain.schemas.base import ApiModel
from crm_backend.domain.schemas.auth import UserPublic


class UserCreateRequest(ApiModel):
    email: Optional[str] = None
    display_name: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserRead(UserPublic):
    """Listing projection; never carries the password hash."""
    email_verified: bool
    created_at: datetime
    last_login: Optional[datetime] = None


class UserCreateResponse(ApiModel):
    success: bool = True
    message: str = "User created successfully"
    user: UserPublic


class UserListResponse(ApiModel):
    success: bool = True
    users: list[UserRead]
