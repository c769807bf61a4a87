from typing import Any, Optional
from uuid import UUID

from domain.exceptions import InvalidIdentifier, ValidationFailed
from domain.interfaces import BoundLogger, LoggingPort, MetricsPort, NoOpLogger


class StoreService:
    """
    Shared plumbing for the store use cases: optional logging and metrics ports
    plus identifier checks.
    """
    entity = "decision"

    def __init__(
        self,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
    ):
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    def _log(self, **context: Any) -> BoundLogger:
        if self.logging_port:
            return self.logging_port.bind(entity=self.entity, **context)
        return NoOpLogger()

    def _count(self, operation: str, outcome: str) -> None:
        if self.metrics_port:
            self.metrics_port.increment_operation(entity=self.entity, operation=operation, outcome=outcome)

    def _rejected(self, operation: str, error: ValidationFailed, log: BoundLogger) -> None:
        self._count(operation, "invalid")
        if self.metrics_port:
            for violation in error.violations:
                self.metrics_port.increment_validation_failure(code=violation.code.value)
        log.warning(
            f"{self.entity}_{operation}_rejected",
            violations=[f"{v.field}:{v.code.value}" for v in error.violations],
        )

    def _require_id(self, entity_id: Any) -> str:
        """Return the canonical form of a UUID id or raise InvalidIdentifier."""
        try:
            return str(UUID(str(entity_id)))
        except ValueError:
            raise InvalidIdentifier(self.entity.capitalize(), entity_id) from None
