from datetime import datetime
from typing import Optional
from sqlalchemy import Column, String, Float, Integer, DateTime, Text
from sqlalchemy.orm import Mapped
from domain.entities.project import Project
from domain.services.normalization import Normalization
from infrastructure.db.models.base import Base, JSONDocument, as_utc


class ProjectModel(Base):
    __tablename__ = "project"
    id: Mapped[str] = Column(String(36), primary_key=True)
    name: Mapped[str] = Column(String(200), nullable=False)
    description: Mapped[Optional[str]] = Column(Text, nullable=True)
    deadline: Mapped[Optional[datetime]] = Column(DateTime(timezone=True), nullable=True)
    progress: Mapped[float] = Column(Float, nullable=False, default=0)
    team: Mapped[int] = Column(Integer, nullable=False, default=0)
    decisions: Mapped[list] = Column(JSONDocument, nullable=False)
    created_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at: Mapped[datetime] = Column(DateTime(timezone=True), nullable=False)

    def to_domain(self) -> Project:
        return Project(
            id=self.id,
            name=self.name,
            description=self.description,
            deadline=as_utc(self.deadline),
            progress=Normalization.to_number(self.progress),
            team=self.team,
            decisions=list(self.decisions or []),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectModel":
        model = cls(id=project.id, created_at=project.created_at)
        model.copy_from(project)
        return model

    def copy_from(self, project: Project) -> None:
        self.name = project.name
        self.description = project.description
        self.deadline = project.deadline
        self.progress = project.progress
        self.team = project.team
        self.decisions = list(project.decisions)
        self.updated_at = project.updated_at
