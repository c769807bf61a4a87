from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional
from domain.entities import Project
from app.schemas.common import CamelModel, Number


class ProjectPayload(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: Optional[float] = None
    team: Optional[int] = None
    decisions: Optional[list[str]] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProjectOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    progress: Number
    team: int
    decisions: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectOut":
        return cls.model_validate(asdict(project))


class ProjectResponse(CamelModel):
    project: ProjectOut


class ProjectListResponse(CamelModel):
    projects: list[ProjectOut]
