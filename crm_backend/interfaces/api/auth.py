"""Auth API routes — sign-in and current identity."""

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError

from crm_backend.application.services.auth_service import AuthService
from crm_backend.core.exceptions import InternalServerError
from crm_backend.domain.models.user import User
from crm_backend.domain.schemas.auth import MeResponse, SignInRequest, SignInResponse, UserPublic
from crm_backend.interfaces.api.deps import get_current_user
from crm_backend.interfaces.deps import get_auth_service

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/signin", response_model=SignInResponse)
def signin(
    body: SignInRequest,
    request: Request,
    auth: AuthService = Depends(get_auth_service),
):
    try:
        user, token = auth.sign_in(
            body.email,
            body.password,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except SQLAlchemyError:
        logger.exception("Sign-in failed")
        raise InternalServerError()

    return SignInResponse(user=UserPublic.model_validate(user), token=token)


@router.get("/me", response_model=MeResponse)
def get_me(user: User = Depends(get_current_user)):
    return MeResponse(user=UserPublic.model_validate(user))
