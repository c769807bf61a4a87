from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, func, select
from domain.entities import Project
from domain.exceptions import NotFound
from domain.interfaces import ProjectRepository
from infrastructure.db.models import ProjectModel
from infrastructure.db.repositories.store_errors import store_guard


class ProjectRepoSqlalchemy(ProjectRepository):
    """SQLAlchemy implementation of ProjectRepository."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def save_project(self, project: Project) -> Project:
        async with store_guard(self.db, "project", "save"):
            self.db.add(ProjectModel.from_domain(project))
            await self.db.commit()
        return project
    
    async def get_project(self, project_id: str) -> Optional[Project]:
        async with store_guard(self.db, "project", "get"):
            project_model = await self.db.get(ProjectModel, project_id)
        return project_model.to_domain() if project_model else None
    
    async def list_projects(self) -> list[Project]:
        """Get every project, newest first."""
        stmt = select(ProjectModel).order_by(ProjectModel.created_at.desc(), ProjectModel.id.asc())
        async with store_guard(self.db, "project", "list"):
            result = await self.db.execute(stmt)
            project_models = result.scalars().all()
        return [m.to_domain() for m in project_models]
    
    async def count_projects(self) -> int:
        async with store_guard(self.db, "project", "count"):
            result = await self.db.execute(select(func.count()).select_from(ProjectModel))
        return result.scalar_one()
    
    async def update_project(self, project: Project) -> Project:
        async with store_guard(self.db, "project", "update"):
            project_model = await self.db.get(ProjectModel, project.id)
            if project_model is None:
                raise NotFound("Project", project.id)
            project_model.copy_from(project)
            await self.db.commit()
        return project
    
    async def delete_project(self, project_id: str) -> bool:
        async with store_guard(self.db, "project", "delete"):
            result = await self.db.execute(delete(ProjectModel).where(ProjectModel.id == project_id))
            await self.db.commit()
        return result.rowcount > 0
