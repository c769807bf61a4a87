from .decision_repo import DecisionRepository
from .goal_repo import GoalRepository
from .project_repo import ProjectRepository
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger, NoOpLogger

__all__ = ["DecisionRepository", "GoalRepository", "ProjectRepository", "MetricsPort", "LoggingPort", "BoundLogger", "NoOpLogger"]
