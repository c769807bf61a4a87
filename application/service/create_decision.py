import time
from typing import Any, Mapping, Optional
from domain.entities import Decision
from domain.exceptions import ServerFault, ValidationFailed
from domain.interfaces import DecisionRepository, MetricsPort, LoggingPort
from domain.services import validate_decision
from application.service.base import StoreService


class CreateDecisionService(StoreService):
    def __init__(
        self,
        decision_repo: DecisionRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
    ):
        """
        Initialize the decision creation service.

        Args:
            decision_repo: Repository the new decision is saved to
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        super().__init__(metrics_port=metrics_port, logging_port=logging_port)
        self.decision_repo = decision_repo

    async def execute(self, payload: Mapping[str, Any]) -> Decision:
        """
        Validate a full decision payload and persist it.

        Nothing is written when validation fails.

        Raises:
            ValidationFailed: with every violation found in the payload
            ServerFault: if the store rejects the write
        """
        start_time = time.time()
        log = self._log(step="decision_create")

        try:
            fields = validate_decision(payload)
        except ValidationFailed as e:
            self._rejected("create", e, log)
            raise

        decision = Decision.create(fields)
        try:
            await self.decision_repo.save_decision(decision)
        except ServerFault as e:
            self._count("create", "error")
            log.error("decision_create_failed", decision_id=decision.id, error=str(e))
            raise

        self._count("create", "success")
        log.info(
            "decision_created",
            decision_id=decision.id,
            category=decision.category,
            impact_score=decision.impact_score,
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return decision
