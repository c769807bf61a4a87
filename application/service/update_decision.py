import time
from typing import Any, Mapping
from domain.entities import Decision
from domain.exceptions import NotFound, ServerFault, ValidationFailed
from domain.interfaces import DecisionRepository
from domain.services import Normalization, validate_decision
from domain.services.validation import DECISION_COMPOSITES
from application.service.base import StoreService


class UpdateDecisionService(StoreService):
    def __init__(self, decision_repo: DecisionRepository, metrics_port=None, logging_port=None):
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo

    async def execute(self, decision_id: str, patch: Mapping[str, Any]) -> Decision:
        """
        Apply a partial update to a stored decision.

        The patch is merged onto the stored record (stakeholders and outcomes
        sub-field by sub-field) and the merged record is validated as a whole,
        so an update can never leave a decision breaking its invariants.

        Raises:
            InvalidIdentifier, NotFound, ValidationFailed, ServerFault
        """
        start_time = time.time()
        decision_id = self._require_id(decision_id)
        log = self._log(step="decision_update", decision_id=decision_id)

        current = await self.decision_repo.get_decision(decision_id)
        if current is None:
            self._count("update", "not_found")
            raise NotFound("Decision", decision_id)

        # a null status leaves the stored one in place
        changes = {k: v for k, v in patch.items() if not (k == "status" and v is None)}
        merged = Normalization.merge_patch(current.to_payload(), changes, DECISION_COMPOSITES)
        try:
            fields = validate_decision(merged)
        except ValidationFailed as e:
            self._rejected("update", e, log)
            raise

        updated = current.apply(fields)
        try:
            await self.decision_repo.update_decision(updated)
        except ServerFault as e:
            self._count("update", "error")
            log.error("decision_update_failed", error=str(e))
            raise

        self._count("update", "success")
        log.info(
            "decision_updated",
            fields=sorted(patch.keys()),
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return updated
