"""User service — admin provisioning and listing."""

from typing import List, Optional

import structlog

from crm_backend.application.services.security import PasswordHasher
from crm_backend.core.exceptions import MissingFieldsError, ValidationFailedError
from crm_backend.domain.models.user import User, ROLE_ADMIN, ROLE_USER, ROLES
from crm_backend.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def create_user(
    users: UserRepository,
    hasher: PasswordHasher,
    email: Optional[str],
    display_name: Optional[str],
    password: Optional[str],
    role: Optional[str] = None,
) -> User:
    if not email or not email.strip() or not display_name or not password:
        raise MissingFieldsError("Email, display name and password are required")

    if "\x00" in password:
        raise ValidationFailedError("Password must not contain NUL characters")

    role = role or ROLE_USER
    if role not in ROLES:
        raise ValidationFailedError(f"Role must be one of: {', '.join(ROLES)}")

    user = users.create(
        email=email,
        display_name=display_name,
        password_hash=hasher.hash(password),
        role=role,
    )
    logger.info("User created", user_id=user.id, role=user.role)
    return user


def list_users(users: UserRepository) -> List[User]:
    return users.list_all()


def ensure_admin(users: UserRepository, hasher: PasswordHasher, email: str, password: str, display_name: str) -> Optional[User]:
    """Create the bootstrap admin unless a user with that email already exists."""
    if users.get_by_email(email) is not None:
        return None
    user = create_user(users, hasher, email, display_name, password, ROLE_ADMIN)
    logger.info("Bootstrap admin created", email=user.email)
    return user
