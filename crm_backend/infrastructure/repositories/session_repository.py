"""
SQLAlchemy Implementation of the Session Repository.
Only the SHA-256 digest of each token is persisted.
"""

import hashlib
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from crm_backend.domain.models.session import AuthSession
from crm_backend.domain.repositories.session_repository import SessionRepository
from crm_backend.infrastructure.repositories.base_repository import SQLAlchemyRepository


def token_digest(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class SQLAlchemySessionRepository(SQLAlchemyRepository[AuthSession], SessionRepository):
    """Session ledger implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, AuthSession)

    def _deactivate(self, user_id: str) -> int:
        stmt = (
            update(AuthSession)
            .where(AuthSession.user_id == user_id, AuthSession.is_active.is_(True))
            .values(is_active=False)
        )
        return self.db.execute(stmt).rowcount

    def _build(self, session_id, user_id, token, expires_at, ip_address, user_agent) -> AuthSession:
        return AuthSession(
            id=session_id,
            user_id=user_id,
            token_hash=token_digest(token),
            expires_at=expires_at,
            ip_address=ip_address,
            user_agent=user_agent,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

    def deactivate_all_active(self, user_id: str) -> int:
        changed = self._deactivate(user_id)
        self.db.commit()
        return changed

    def create(self, session_id, user_id, token, expires_at, ip_address=None, user_agent=None) -> AuthSession:
        session = self._build(session_id, user_id, token, expires_at, ip_address, user_agent)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def replace_active(self, session_id, user_id, token, expires_at, ip_address=None, user_agent=None) -> AuthSession:
        session = self._build(session_id, user_id, token, expires_at, ip_address, user_agent)
        try:
            self._deactivate(user_id)
            self.db.add(session)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(session)
        return session

    def get_active_by_token(self, token: str, now: datetime) -> Optional[AuthSession]:
        stmt = select(AuthSession).where(
            AuthSession.token_hash == token_digest(token),
            AuthSession.is_active.is_(True),
        )
        session = self.db.scalars(stmt).first()
        if session is None:
            return None
        expires_at = session.expires_at
        if expires_at.tzinfo is None:
            # SQLite hands back naive datetimes
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return session if expires_at > now else None

    def list_for_user(self, user_id: str) -> List[AuthSession]:
        stmt = (
            select(AuthSession)
            .where(AuthSession.user_id == user_id)
            .order_by(AuthSession.created_at.desc())
        )
        return list(self.db.scalars(stmt))
