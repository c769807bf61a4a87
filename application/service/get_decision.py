from domain.entities import Decision
from domain.exceptions import NotFound
from domain.interfaces import DecisionRepository
from application.service.base import StoreService


class GetDecisionService(StoreService):
    def __init__(self, decision_repo: DecisionRepository, metrics_port=None, logging_port=None):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo

    async def execute(self, decision_id: str) -> Decision:
        """Get a decision by ID. Raises InvalidIdentifier or NotFound."""
        decision_id = self._require_id(decision_id)
        decision = await self.decision_repo.get_decision(decision_id)
        if decision is None:
            self._count("get", "not_found")
            raise NotFound("Decision", decision_id)
        self._count("get", "success")
        return decision
