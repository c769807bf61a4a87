# infrastructure/metrics/metrics.py
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

decision_operations_total = Counter(
    "decision_operations_total",
    "Store operations by entity and outcome",
    ["entity", "operation", "outcome"]  # outcome: success|invalid|not_found|error
)

decision_validation_failures_total = Counter(
    "decision_validation_failures_total",
    "Validation violations by code",
    ["code"]  # RequiredFieldMissing|OutOfRange|InvalidEnum|EmptyCollection|InvalidFormat
)

store_failures_total = Counter(
    "store_failures_total",
    "Storage failures surfaced as ServerFault",
    ["store"]  # decision|goal|project
)

api_client_retries_total = Counter(
    "api_client_retries_total",
    "Retried calls made by the decision API client"
)


def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
