from typing import Any, Mapping, Optional
from domain.entities import Goal
from domain.exceptions import NotFound, ValidationFailed
from domain.interfaces import GoalRepository, MetricsPort, LoggingPort
from domain.services import Normalization, validate_goal
from application.service.base import StoreService


class GoalService(StoreService):
    """List, create, read, patch and delete goals."""
    entity = "goal"

    def __init__(
        self,
        goal_repo: GoalRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
    ):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.goal_repo = goal_repo

    async def list_all(self) -> list[Goal]:
        goals = await self.goal_repo.list_goals()
        self._count("list", "success")
        return goals

    async def create(self, payload: Mapping[str, Any]) -> Goal:
        log = self._log(step="goal_create")
        try:
            fields = validate_goal(payload)
        except ValidationFailed as e:
            self._rejected("create", e, log)
            raise
        goal = await self.goal_repo.save_goal(Goal.create(fields))
        self._count("create", "success")
        log.info("goal_created", goal_id=goal.id)
        return goal

    async def get(self, goal_id: str) -> Goal:
        goal_id = self._require_id(goal_id)
        goal = await self.goal_repo.get_goal(goal_id)
        if goal is None:
            self._count("get", "not_found")
            raise NotFound("Goal", goal_id)
        self._count("get", "success")
        return goal

    async def update(self, goal_id: str, patch: Mapping[str, Any]) -> Goal:
        """Merge the patch onto the stored goal and re-validate the result."""
        current = await self.get(goal_id)
        log = self._log(step="goal_update", goal_id=current.id)
        merged = Normalization.merge_patch(current.to_payload(), patch, composites={})
        try:
            fields = validate_goal(merged)
        except ValidationFailed as e:
            self._rejected("update", e, log)
            raise
        updated = await self.goal_repo.update_goal(current.apply(fields))
        self._count("update", "success")
        log.info("goal_updated", fields=sorted(patch.keys()))
        return updated

    async def delete(self, goal_id: str) -> None:
        goal_id = self._require_id(goal_id)
        if not await self.goal_repo.delete_goal(goal_id):
            self._count("delete", "not_found")
            raise NotFound("Goal", goal_id)
        self._count("delete", "success")
        self._log(step="goal_delete").info("goal_deleted", goal_id=goal_id)
