from typing_extensions import Protocol
from domain.entities import Decision, Page
from typing import Optional


class DecisionRepository(Protocol):
    async def save_decision(self, decision: Decision) -> Decision: ...
    async def get_decision(self, decision_id: str) -> Optional[Decision]: ...
    async def list_decisions(
        self,
        page: int,
        page_size: int,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Page[Decision]: ...
    async def get_all_decisions(self) -> list[Decision]: ...
    async def update_decision(self, decision: Decision) -> Decision: ...
    async def delete_decision(self, decision_id: str) -> bool: ...
