from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""
    
    def increment_operation(self, entity: str, operation: str, outcome: str) -> None:
        """
        Increment the decision_operations_total counter.
        
        Args:
            entity: One of "decision", "goal" or "project"
            operation: One of "create", "get", "list", "update" or "delete"
            outcome: One of "success", "invalid", "not_found" or "error"
        """
        ...
    
    def increment_validation_failure(self, code: str) -> None:
        """
        Increment the decision_validation_failures_total counter.
        
        Args:
            code: Violation code (e.g. "RequiredFieldMissing", "OutOfRange")
        """
        ...
