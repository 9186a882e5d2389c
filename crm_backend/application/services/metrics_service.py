"""Metrics service — dashboard aggregates scoped by role."""

from crm_backend.domain.models.user import User
from crm_backend.domain.repositories.metrics_repository import MetricsRepository
from crm_backend.domain.schemas.dashboard import DashboardMetrics, MetricCounts, RecentActivity

RECENT_ACTIVITY_LIMIT = 10


def get_dashboard_metrics(repo: MetricsRepository, user: User) -> DashboardMetrics:
    """Admins see everything, everyone else only rows they created."""
    created_by = None if user.is_admin else user.id

    counts = MetricCounts(
        leads=repo.count_leads(created_by),
        accounts=repo.count_accounts(created_by),
        deals=repo.count_deals(created_by),
        contacts=repo.count_contacts(created_by),
    )
    activities = [
        RecentActivity.model_validate(row)
        for row in repo.recent_activities(created_by, limit=RECENT_ACTIVITY_LIMIT)
    ]
    return DashboardMetrics(metrics=counts, recent_activities=activities)
