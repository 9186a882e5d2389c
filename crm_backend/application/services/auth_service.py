"""Auth service — sign-in, identity resolution and the admin role gate."""

from datetime import datetime, timezone
from typing import Optional

import structlog

from crm_backend.application.services.security import PasswordHasher
from crm_backend.application.services.token_service import (
    InvalidTokenError,
    TokenExpiredError,
    TokenService,
)
from crm_backend.core.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    MissingFieldsError,
    UnauthenticatedError,
)
from crm_backend.core.ids import generate_id
from crm_backend.domain.models.user import User, ROLE_ADMIN
from crm_backend.domain.repositories.session_repository import SessionRepository
from crm_backend.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        sessions: SessionRepository,
        tokens: TokenService,
        hasher: PasswordHasher,
        enforce_single_session: bool = False,
    ):
        self.users = users
        self.sessions = sessions
        self.tokens = tokens
        self.hasher = hasher
        self.enforce_single_session = enforce_single_session

    def sign_in(
        self,
        email: Optional[str],
        password: Optional[str],
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> tuple[User, str]:
        """Validate credentials, rotate the session ledger and mint a token."""
        if not email or not password:
            raise MissingFieldsError("Email and password are required")

        user = self.users.get_by_email(email)
        if user is None:
            self.hasher.dummy_verify()
            logger.info("Sign-in rejected", email=email.strip().lower())
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Sign-in rejected", email=user.email)
            raise InvalidCredentialsError()

        now = datetime.now(timezone.utc)
        token = self.tokens.issue(user.id, user.email, user.role, now=now)
        self.sessions.replace_active(
            session_id=generate_id("sess"),
            user_id=user.id,
            token=token,
            expires_at=now + self.tokens.ttl,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self.users.record_login(user.id, now)

        logger.info("Sign-in succeeded", user_id=user.id)
        return user, token

    def resolve_identity(self, token: Optional[str]) -> User:
        """Map a bearer token to a live user.

        Every failure surfaces as the same UnauthenticatedError; only the log
        records which check failed.
        """
        if not token:
            raise self._unauthenticated("missing_token")

        try:
            claims = self.tokens.verify(token)
        except TokenExpiredError:
            raise self._unauthenticated("expired_token")
        except InvalidTokenError:
            raise self._unauthenticated("invalid_token")

        if self.enforce_single_session:
            active = self.sessions.get_active_by_token(token, datetime.now(timezone.utc))
            if active is None or active.user_id != claims.user_id:
                raise self._unauthenticated("inactive_session", user_id=claims.user_id)

        user = self.users.get_by_id(claims.user_id)
        if user is None:
            raise self._unauthenticated("unknown_user", user_id=claims.user_id)
        return user

    @staticmethod
    def _unauthenticated(reason: str, **fields) -> UnauthenticatedError:
        logger.info("Identity resolution failed", reason=reason, **fields)
        return UnauthenticatedError()

    @staticmethod
    def require_admin(user: User) -> User:
        if user.role != ROLE_ADMIN:
            logger.warning("Admin access denied", user_id=user.id, role=user.role)
            raise ForbiddenError()
        return user
