from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, func, select
from domain.entities import Goal
from domain.exceptions import NotFound
from domain.interfaces import GoalRepository
from infrastructure.db.models import GoalModel
from infrastructure.db.repositories.store_errors import store_guard


class GoalRepoSqlalchemy(GoalRepository):
    """SQLAlchemy implementation of GoalRepository."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def save_goal(self, goal: Goal) -> Goal:
        async with store_guard(self.db, "goal", "save"):
            self.db.add(GoalModel.from_domain(goal))
            await self.db.commit()
        return goal
    
    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        async with store_guard(self.db, "goal", "get"):
            goal_model = await self.db.get(GoalModel, goal_id)
        return goal_model.to_domain() if goal_model else None
    
    async def list_goals(self) -> list[Goal]:
        """Get every goal, newest first."""
        stmt = select(GoalModel).order_by(GoalModel.created_at.desc(), GoalModel.id.asc())
        async with store_guard(self.db, "goal", "list"):
            result = await self.db.execute(stmt)
            goal_models = result.scalars().all()
        return [m.to_domain() for m in goal_models]
    
    async def count_goals(self) -> int:
        async with store_guard(self.db, "goal", "count"):
            result = await self.db.execute(select(func.count()).select_from(GoalModel))
        return result.scalar_one()
    
    async def update_goal(self, goal: Goal) -> Goal:
        async with store_guard(self.db, "goal", "update"):
            goal_model = await self.db.get(GoalModel, goal.id)
            if goal_model is None:
                raise NotFound("Goal", goal.id)
            goal_model.copy_from(goal)
            await self.db.commit()
        return goal
    
    async def delete_goal(self, goal_id: str) -> bool:
        async with store_guard(self.db, "goal", "delete"):
            result = await self.db.execute(delete(GoalModel).where(GoalModel.id == goal_id))
            await self.db.commit()
        return result.rowcount > 0
