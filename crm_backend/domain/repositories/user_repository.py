"""
User Repository Interface (credential store).
"""

from datetime import datetime
from typing import List, Optional

from crm_backend.domain.repositories.base import BaseRepository
from crm_backend.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""
        ...

    def create(self, email: str, display_name: str, password_hash: str, role: str) -> User:
        """Insert a verified user; raises DuplicateEmailError if the email is taken."""
        ...

    def list_all(self) -> List[User]:
        """All users, newest first."""
        ...

    def record_login(self, user_id: str, when: datetime) -> bool:
        """Set last_login; returns False (and changes nothing) for an unknown id."""
        ...
