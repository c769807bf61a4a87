from typing_extensions import Protocol
from domain.entities import Project
from typing import Optional


class ProjectRepository(Protocol):
    async def save_project(self, project: Project) -> Project: ...
    async def get_project(self, project_id: str) -> Optional[Project]: ...
    async def list_projects(self) -> list[Project]: ...
    async def count_projects(self) -> int: ...
    async def update_project(self, project: Project) -> Project: ...
    async def delete_project(self, project_id: str) -> bool: ...
