"""
Database models package.
Import Base from here or from base.py directly.
"""
from infrastructure.db.models.base import Base

# Import all models to ensure they're registered in the same registry
# This must be done after Base is created
from infrastructure.db.models.decisions import DecisionModel
from infrastructure.db.models.goals import GoalModel
from infrastructure.db.models.projects import ProjectModel

__all__ = ["Base", "DecisionModel", "GoalModel", "ProjectModel"]
