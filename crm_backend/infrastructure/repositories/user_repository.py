"""
SQLAlchemy Implementation of the User Repository.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crm_backend.core.exceptions import DuplicateEmailError
from crm_backend.core.ids import generate_id
from crm_backend.domain.models.user import User
from crm_backend.domain.repositories.user_repository import UserRepository
from crm_backend.infrastructure.repositories.base_repository import SQLAlchemyRepository


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        # lower() on the column as well covers rows written before normalization
        stmt = select(User).where(func.lower(User.email) == normalize_email(email))
        return self.db.scalars(stmt).first()

    def create(self, email: str, display_name: str, password_hash: str, role: str) -> User:
        email = normalize_email(email)
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError()

        now = datetime.now(timezone.utc)
        user = User(
            id=generate_id("user"),
            email=email,
            display_name=display_name,
            password_hash=password_hash,
            role=role,
            email_verified=True,
            created_at=now,
            updated_at=now,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same email
            self.db.rollback()
            raise DuplicateEmailError()
        self.db.refresh(user)
        return user

    def list_all(self) -> List[User]:
        stmt = select(User).order_by(User.created_at.desc())
        return list(self.db.scalars(stmt))

    def record_login(self, user_id: str, when: datetime) -> bool:
        user = self.get_by_id(user_id)
        if user is None:
            return False
        user.last_login = when
        user.updated_at = when
        self.db.commit()
        return True
