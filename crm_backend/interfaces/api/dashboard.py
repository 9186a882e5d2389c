"""Dashboard API — aggregated CRM counts and recent activity."""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from crm_backend.application.services.metrics_service import get_dashboard_metrics
from crm_backend.core.exceptions import InternalServerError
from crm_backend.domain.models.user import User
from crm_backend.domain.repositories.metrics_repository import MetricsRepository
from crm_backend.domain.schemas.dashboard import MetricsResponse
from crm_backend.interfaces.api.deps import get_current_user
from crm_backend.interfaces.deps import get_metrics_repository

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/metrics", response_model=MetricsResponse)
def dashboard_metrics(
    repo: MetricsRepository = Depends(get_metrics_repository),
    user: User = Depends(get_current_user),
):
    try:
        data = get_dashboard_metrics(repo, user)
    except SQLAlchemyError:
        logger.exception("Metrics query failed", user_id=user.id)
        raise InternalServerError("Failed to fetch metrics")

    return MetricsResponse(
        metrics=data.metrics,
        recent_activities=data.recent_activities,
        user_role=user.role,
    )
