"""Contact model — maps to the 'contacts' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from crm_backend.infrastructure.database import Base


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    created_by = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Contact {self.first_name} {self.last_name}>"
