"""FastAPI dependency — bearer token auth and the admin role gate."""

from typing import Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError

from crm_backend.application.services.auth_service import AuthService
from crm_backend.core.exceptions import InternalServerError
from crm_backend.domain.models.user import User
from crm_backend.interfaces.deps import get_auth_service

logger = structlog.get_logger(__name__)

# auto_error=False: missing or non-Bearer headers become our own 401 body
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """Verify the bearer token and re-load the user on every request."""
    token = credentials.credentials if credentials else None
    try:
        return auth.resolve_identity(token)
    except SQLAlchemyError:
        logger.exception("Identity lookup failed")
        raise InternalServerError()


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    return AuthService.require_admin(user)
