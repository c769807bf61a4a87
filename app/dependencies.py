"""
FastAPI dependency providers.

Routers only ever see the domain ports; tests swap the repositories through
``app.dependency_overrides``.
"""
import uuid
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from domain.interfaces import DecisionRepository, GoalRepository, LoggingPort, MetricsPort, ProjectRepository
from infrastructure.db.database import get_db_session
from infrastructure.db.repositories import DecisionRepoSqlalchemy, GoalRepoSqlalchemy, ProjectRepoSqlalchemy
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


def get_decision_repo(db: AsyncSession = Depends(get_db_session)) -> DecisionRepository:
    return DecisionRepoSqlalchemy(db)


def get_goal_repo(db: AsyncSession = Depends(get_db_session)) -> GoalRepository:
    return GoalRepoSqlalchemy(db)


def get_project_repo(db: AsyncSession = Depends(get_db_session)) -> ProjectRepository:
    return ProjectRepoSqlalchemy(db)


def get_metrics_port() -> MetricsPort:
    return MetricsAdapter()


def get_logging_port(
    x_request_id: Optional[str] = Header(
        None,
        alias="X-Request-ID",
        description="Request ID for tracing. Generated when absent.",
    ),
) -> LoggingPort:
    return LoggingAdapter(request_id=x_request_id or str(uuid.uuid4()))
