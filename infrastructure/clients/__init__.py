from .decision_api_client import ApiClientError, ApiUnavailableError, DecisionApiClient

__all__ = ["ApiClientError", "ApiUnavailableError", "DecisionApiClient"]
