# import
from .decision import AffectedArea, Category, Decision, DecisionStatus, Outcomes, Stakeholders
from .goal import Goal
from .project import Project
from .page import Page

__all__ = [
    "Decision", "Stakeholders", "Outcomes", "Category", "DecisionStatus", "AffectedArea",
    "Goal", "Project", "Page",
]
