"""
Session Repository Interface (session ledger).
"""

from datetime import datetime
from typing import List, Optional

from crm_backend.domain.repositories.base import BaseRepository
from crm_backend.domain.models.session import AuthSession


class SessionRepository(BaseRepository[AuthSession]):
    """Interface for session ledger operations."""

    def deactivate_all_active(self, user_id: str) -> int:
        """Mark every active session of the user inactive; returns rows changed."""
        ...

    def create(
        self,
        session_id: str,
        user_id: str,
        token: str,
        expires_at: datetime,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AuthSession:
        """Insert one active session row."""
        ...

    def replace_active(
        self,
        session_id: str,
        user_id: str,
        token: str,
        expires_at: datetime,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AuthSession:
        """Deactivate prior sessions and insert the new one in one transaction."""
        ...

    def get_active_by_token(self, token: str, now: datetime) -> Optional[AuthSession]:
        """Active, unexpired session issued for this exact token."""
        ...

    def list_for_user(self, user_id: str) -> List[AuthSession]:
        ...
