"""Session ledger model — maps to the 'auth_sessions' table."""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Index

from crm_backend.infrastructure.database import Base


class AuthSession(Base):
    __tablename__ = "auth_sessions"
    __table_args__ = (Index("ix_auth_sessions_user_active", "user_id", "is_active"),)

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), ForeignKey("auth_users.id"), nullable=False)
    token_hash = Column(String(64), nullable=False, index=True)  # sha256 hex
    expires_at = Column(DateTime(timezone=True), nullable=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(512), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<AuthSession {self.id} user={self.user_id} active={self.is_active}>"
