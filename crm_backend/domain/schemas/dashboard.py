"""Pydantic schemas for dashboard metrics."""

from datetime import datetime
from typing import Optional

from crm_backend.domain.schemas.base import ApiModel


class MetricCounts(ApiModel):
    leads: int
    accounts: int
    deals: int
    contacts: int


class RecentActivity(ApiModel):
    type: str
    name: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class DashboardMetrics(ApiModel):
    metrics: MetricCounts
    recent_activities: list[RecentActivity]


class MetricsResponse(DashboardMetrics):
    success: bool = True
    user_role: str
