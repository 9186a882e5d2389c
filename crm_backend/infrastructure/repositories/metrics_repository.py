"""
SQLAlchemy Implementation of the Metrics Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, literal, select, union_all
from sqlalchemy.orm import Session

from crm_backend.domain.models.account import Account
from crm_backend.domain.models.contact import Contact
from crm_backend.domain.models.deal import ActiveDeal
from crm_backend.domain.models.lead import Lead
from crm_backend.domain.repositories.metrics_repository import MetricsRepository


class SQLAlchemyMetricsRepository(MetricsRepository):
    """Counting queries, optionally scoped to rows a single user created."""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _scoped(stmt, model, created_by: Optional[str]):
        if created_by is not None:
            stmt = stmt.where(model.created_by == created_by)
        return stmt

    def _count(self, model, created_by: Optional[str]) -> int:
        stmt = self._scoped(select(func.count(model.id)), model, created_by)
        return self.db.execute(stmt).scalar_one() or 0

    def count_leads(self, created_by: Optional[str] = None) -> int:
        return self._count(Lead, created_by)

    def count_accounts(self, created_by: Optional[str] = None) -> int:
        return self._count(Account, created_by)

    def count_deals(self, created_by: Optional[str] = None) -> int:
        return self._count(ActiveDeal, created_by)

    def count_contacts(self, created_by: Optional[str] = None) -> int:
        return self._count(Contact, created_by)

    def recent_activities(self, created_by: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
        leads = self._scoped(
            select(
                literal("lead").label("type"),
                (Lead.first_name + " " + Lead.last_name).label("name"),
                Lead.status.label("status"),
                Lead.created_at.label("created_at"),
            ),
            Lead,
            created_by,
        )
        accounts = self._scoped(
            select(
                literal("account").label("type"),
                Account.account_name.label("name"),
                Account.status.label("status"),
                Account.created_at.label("created_at"),
            ),
            Account,
            created_by,
        )
        deals = self._scoped(
            select(
                literal("deal").label("type"),
                ActiveDeal.deal_name.label("name"),
                ActiveDeal.stage.label("status"),
                ActiveDeal.created_at.label("created_at"),
            ),
            ActiveDeal,
            created_by,
        )

        activity = union_all(leads, accounts, deals).subquery("activity")
        stmt = select(activity).order_by(activity.c.created_at.desc()).limit(limit)
        return [dict(row) for row in self.db.execute(stmt).mappings()]
