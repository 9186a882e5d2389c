"""Account model — maps to the 'accounts' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from crm_backend.infrastructure.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_name = Column(String(300), nullable=False)
    industry = Column(String(100), nullable=True)
    status = Column(String(50), nullable=False, default="active")
    created_by = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Account {self.account_name}>"
