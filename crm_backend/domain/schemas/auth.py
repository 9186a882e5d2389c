"""Pydantic schemas for sign-in and identity."""

from typing import Optional

from crm_backend.domain.schemas.base import ApiModel


class SignInRequest(ApiModel):
    # Optional so that absent fields surface as 400, not a 422 validation error
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(ApiModel):
    id: str
    email: str
    role: str
    display_name: str


class SignInResponse(ApiModel):
    success: bool = True
    message: str = "Signed in successfully"
    user: UserPublic
    token: str


class MeResponse(ApiModel):
    success: bool = True
    user: UserPublic
