"""Deal model — maps to the 'active_deals' table."""

from sqlalchemy import Column, Integer, String, Numeric, DateTime
from sqlalchemy.sql import func

from crm_backend.infrastructure.database import Base


class ActiveDeal(Base):
    __tablename__ = "active_deals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    deal_name = Column(String(300), nullable=False)
    stage = Column(String(50), nullable=False, default="prospecting")
    amount = Column(Numeric(14, 2), nullable=True)
    created_by = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<ActiveDeal {self.deal_name} ({self.stage})>"
