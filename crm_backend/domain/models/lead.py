"""Lead model — maps to the 'leads' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from crm_backend.infrastructure.database import Base


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    email = Column(String(255), nullable=True)
    company = Column(String(200), nullable=True)
    status = Column(String(50), nullable=False, default="new")
    created_by = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Lead {self.first_name} {self.last_name}>"
