"""
API Dependencies — repositories and services wired from configuration.
"""

from datetime import timedelta

from fastapi import Depends
from sqlalchemy.orm import Session

from crm_backend.config import Settings, get_settings
from crm_backend.infrastructure.database import get_db
from crm_backend.domain.repositories.metrics_repository import MetricsRepository
from crm_backend.domain.repositories.session_repository import SessionRepository
from crm_backend.domain.repositories.user_repository import UserRepository
from crm_backend.infrastructure.repositories.metrics_repository import SQLAlchemyMetricsRepository
from crm_backend.infrastructure.repositories.session_repository import SQLAlchemySessionRepository
from crm_backend.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from crm_backend.application.services.auth_service import AuthService
from crm_backend.application.services.security import PasswordHasher
from crm_backend.application.services.token_service import TokenService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db)


def get_session_repository(db: Session = Depends(get_db)) -> SessionRepository:
    return SQLAlchemySessionRepository(db)


def get_metrics_repository(db: Session = Depends(get_db)) -> MetricsRepository:
    return SQLAlchemyMetricsRepository(db)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(
        secret=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(hours=settings.JWT_EXPIRATION_HOURS),
    )


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    sessions: SessionRepository = Depends(get_session_repository),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        users=users,
        sessions=sessions,
        tokens=tokens,
        hasher=hasher,
        enforce_single_session=settings.ENFORCE_SINGLE_SESSION,
    )
