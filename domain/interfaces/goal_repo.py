from typing_extensions import Protocol
from domain.entities import Goal
from typing import Optional


class GoalRepository(Protocol):
    async def save_goal(self, goal: Goal) -> Goal: ...
    async def get_goal(self, goal_id: str) -> Optional[Goal]: ...
    async def list_goals(self) -> list[Goal]: ...
    async def count_goals(self) -> int: ...
    async def update_goal(self, goal: Goal) -> Goal: ...
    async def delete_goal(self, goal_id: str) -> bool: ...
