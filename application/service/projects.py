from typing import Any, Mapping, Optional
from domain.entities import Project
from domain.exceptions import NotFound, ValidationFailed
from domain.interfaces import ProjectRepository, MetricsPort, LoggingPort
from domain.services import Normalization, validate_project
from application.service.base import StoreService


class ProjectService(StoreService):
    """List, create, read, patch and delete projects."""
    entity = "project"

    def __init__(
        self,
        project_repo: ProjectRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
    ):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.project_repo = project_repo

    async def list_all(self) -> list[Project]:
        projects = await self.project_repo.list_projects()
        self._count("list", "success")
        return projects

    async def create(self, payload: Mapping[str, Any]) -> Project:
        log = self._log(step="project_create")
        try:
            fields = validate_project(payload)
        except ValidationFailed as e:
            self._rejected("create", e, log)
            raise
        project = await self.project_repo.save_project(Project.create(fields))
        self._count("create", "success")
        log.info("project_created", project_id=project.id)
        return project

    async def get(self, project_id: str) -> Project:
        project_id = self._require_id(project_id)
        project = await self.project_repo.get_project(project_id)
        if project is None:
            self._count("get", "not_found")
            raise NotFound("Project", project_id)
        self._count("get", "success")
        return project

    async def update(self, project_id: str, patch: Mapping[str, Any]) -> Project:
        """Merge the patch onto the stored project and re-validate the result."""
        current = await self.get(project_id)
        log = self._log(step="project_update", project_id=current.id)
        merged = Normalization.merge_patch(current.to_payload(), patch, composites={})
        try:
            fields = validate_project(merged)
        except ValidationFailed as e:
            self._rejected("update", e, log)
            raise
        updated = await self.project_repo.update_project(current.apply(fields))
        self._count("update", "success")
        log.info("project_updated", fields=sorted(patch.keys()))
        return updated

    async def delete(self, project_id: str) -> None:
        project_id = self._require_id(project_id)
        if not await self.project_repo.delete_project(project_id):
            self._count("delete", "not_found")
            raise NotFound("Project", project_id)
        self._count("delete", "success")
        self._log(step="project_delete").info("project_deleted", project_id=project_id)
