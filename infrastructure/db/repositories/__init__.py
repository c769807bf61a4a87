from .decision_repo_sqlalchemy import DecisionRepoSqlalchemy
from .goal_repo_sqlalchemy import GoalRepoSqlalchemy
from .project_repo_sqlalchemy import ProjectRepoSqlalchemy

__all__ = ["DecisionRepoSqlalchemy", "GoalRepoSqlalchemy", "ProjectRepoSqlalchemy"]
