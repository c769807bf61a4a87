"""
Metrics adapter that implements MetricsPort protocol.

This adapter wraps the Prometheus counters to provide a clean interface
for the application layer.
"""
from infrastructure.metrics.metrics import (
    decision_operations_total,
    decision_validation_failures_total,
)


class MetricsAdapter:
    """
    Adapter that implements MetricsPort by incrementing Prometheus counters
    (exposed on the /metrics endpoint).
    """
    
    def increment_operation(self, entity: str, operation: str, outcome: str) -> None:
        """
        Increment the decision_operations_total counter.
        
        Args:
            entity: One of "decision", "goal" or "project"
            operation: One of "create", "get", "list", "update" or "delete"
            outcome: One of "success", "invalid", "not_found" or "error"
        """
        decision_operations_total.labels(entity=entity, operation=operation, outcome=outcome).inc()
    
    def increment_validation_failure(self, code: str) -> None:
        """
        Increment the decision_validation_failures_total counter.
        
        Args:
            code: Violation code (e.g. "RequiredFieldMissing")
        """
        decision_validation_failures_total.labels(code=code).inc()
