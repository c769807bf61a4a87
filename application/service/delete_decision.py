from domain.exceptions import NotFound
from domain.interfaces import DecisionRepository
from application.service.base import StoreService


class DeleteDecisionService(StoreService):
    def __init__(self, decision_repo: DecisionRepository, metrics_port=None, logging_port=None):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo

    async def execute(self, decision_id: str) -> None:
        """Hard-delete a decision. Deleting twice raises NotFound the second time."""
        decision_id = self._require_id(decision_id)
        deleted = await self.decision_repo.delete_decision(decision_id)
        if not deleted:
            self._count("delete", "not_found")
            raise NotFound("Decision", decision_id)
        self._count("delete", "success")
        self._log(step="decision_delete").info("decision_deleted", decision_id=decision_id)
