from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import and_, delete, func, or_, select
from domain.entities import Decision, Page
from domain.exceptions import NotFound
from domain.interfaces import DecisionRepository
from infrastructure.db.models import DecisionModel
from infrastructure.db.repositories.store_errors import store_guard


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class DecisionRepoSqlalchemy(DecisionRepository):
    """SQLAlchemy implementation of DecisionRepository."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def save_decision(self, decision: Decision) -> Decision:
        """Insert a new decision."""
        async with store_guard(self.db, "decision", "save"):
            self.db.add(DecisionModel.from_domain(decision))
            await self.db.commit()
        return decision
    
    async def get_decision(self, decision_id: str) -> Optional[Decision]:
        """Get a decision by ID."""
        async with store_guard(self.db, "decision", "get"):
            decision_model = await self.db.get(DecisionModel, decision_id)
        return decision_model.to_domain() if decision_model else None
    
    async def list_decisions(
        self,
        page: int,
        page_size: int,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Page[Decision]:
        """
        Get one page of decisions, newest first (ties broken by id).

        ``search`` matches title or description case-insensitively; category and
        status are exact matches.
        """
        filters = []
        if search:
            pattern = _like_pattern(search)
            filters.append(or_(
                DecisionModel.title.ilike(pattern, escape="\\"),
                DecisionModel.description.ilike(pattern, escape="\\"),
            ))
        if category:
            filters.append(DecisionModel.category == category)
        if status:
            filters.append(DecisionModel.status == status)

        count_stmt = select(func.count()).select_from(DecisionModel)
        stmt = (
            select(DecisionModel)
            .order_by(DecisionModel.created_at.desc(), DecisionModel.id.asc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        if filters:
            count_stmt = count_stmt.where(and_(*filters))
            stmt = stmt.where(and_(*filters))

        async with store_guard(self.db, "decision", "list"):
            total = (await self.db.execute(count_stmt)).scalar_one()
            result = await self.db.execute(stmt)
            decision_models = result.scalars().all()
        return Page(
            items=[dm.to_domain() for dm in decision_models],
            total=total,
            page=page,
            page_size=page_size,
        )
    
    async def get_all_decisions(self) -> list[Decision]:
        """Get every decision, newest first."""
        stmt = select(DecisionModel).order_by(DecisionModel.created_at.desc(), DecisionModel.id.asc())
        async with store_guard(self.db, "decision", "list"):
            result = await self.db.execute(stmt)
            decision_models = result.scalars().all()
        return [dm.to_domain() for dm in decision_models]
    
    async def update_decision(self, decision: Decision) -> Decision:
        """Overwrite the stored decision with the given one."""
        async with store_guard(self.db, "decision", "update"):
            decision_model = await self.db.get(DecisionModel, decision.id)
            if decision_model is None:
                raise NotFound("Decision", decision.id)
            decision_model.copy_from(decision)
            await self.db.commit()
        return decision
    
    async def delete_decision(self, decision_id: str) -> bool:
        """Hard-delete a decision. Returns False when nothing was deleted."""
        async with store_guard(self.db, "decision", "delete"):
            result = await self.db.execute(delete(DecisionModel).where(DecisionModel.id == decision_id))
            await self.db.commit()
        return result.rowcount > 0
