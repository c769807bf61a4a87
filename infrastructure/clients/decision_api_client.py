"""
Async client for the decision tracker HTTP API.

Uses httpx with separate connect/read timeouts and tenacity for bounded
exponential-backoff retries. Only transient failures are retried: timeouts,
network errors and 5xx responses. A 4xx response is raised immediately as
ApiClientError carrying the server's ``{message, errors}`` body.
"""
from datetime import datetime
from typing import Any, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.config import get_api_client_config
from domain.services.normalization import Normalization
from infrastructure.logging.structlog_logs import logger
from infrastructure.metrics.metrics import api_client_retries_total

DATE_KEYS = ("createdAt", "updatedAt", "deadline", "date")


class ApiClientError(Exception):
    """Non-retryable error response (4xx)."""

    def __init__(self, status_code: int, message: str, errors: Optional[list[str]] = None):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status_code}: {message}")


class ApiUnavailableError(Exception):
    """The API could not be reached successfully within the retry budget."""

    def __init__(self, message: str, attempts: int):
        self.attempts = attempts
        super().__init__(message)


class _ServerSideError(Exception):
    def __init__(self, response: httpx.Response):
        self.response = response
        super().__init__(f"server returned {response.status_code}")


TRANSIENT_ERRORS = (httpx.TimeoutException, httpx.TransportError, _ServerSideError)


class DecisionApiClient:
    """
    HTTP client for the decision, goal, project and analytics endpoints.

    Responses are returned as plain dicts with camelCase keys; ISO-8601 date
    fields are parsed into timezone-aware datetimes.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        backoff_multiplier: Optional[float] = None,
        backoff_max: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: API root including the ``/api`` prefix
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
            max_attempts: Total attempts per call, first one included
            backoff_multiplier: Exponential backoff multiplier in seconds
            backoff_max: Upper bound for a single backoff wait
            transport: Optional httpx transport, used by tests

        Unset arguments fall back to ApiClientConfig.
        """
        config = get_api_client_config()
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.max_attempts = max_attempts if max_attempts is not None else config.max_attempts
        self.backoff_multiplier = backoff_multiplier if backoff_multiplier is not None else config.backoff_multiplier
        self.backoff_max = backoff_max if backoff_max is not None else config.backoff_max
        connect_timeout = connect_timeout if connect_timeout is not None else config.connect_timeout
        read_timeout = read_timeout if read_timeout is not None else config.read_timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(
                connect=connect_timeout,
                read=read_timeout,
                write=read_timeout,
                pool=connect_timeout,
            ),
            transport=transport,
        )

    # Decisions

    async def list_decisions(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> dict[str, Any]:
        params = {"page": page, "limit": limit, "search": search, "category": category, "status": status}
        return await self._request("GET", "/decisions", params={k: v for k, v in params.items() if v is not None})

    async def get_decision(self, decision_id: str) -> dict[str, Any]:
        return (await self._request("GET", f"/decisions/{decision_id}"))["decision"]

    async def create_decision(self, decision: dict[str, Any]) -> dict[str, Any]:
        return (await self._request("POST", "/decisions", json=decision))["decision"]

    async def update_decision(self, decision_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return (await self._request("PATCH", f"/decisions/{decision_id}", json=changes))["decision"]

    async def delete_decision(self, decision_id: str) -> None:
        await self._request("DELETE", f"/decisions/{decision_id}")

    async def similar_decisions(self, decision_id: str) -> list[dict[str, Any]]:
        return (await self._request("GET", f"/decisions/{decision_id}/similar"))["decisions"]

    # Goals and projects

    async def list_goals(self) -> list[dict[str, Any]]:
        return (await self._request("GET", "/goals"))["goals"]

    async def create_goal(self, goal: dict[str, Any]) -> dict[str, Any]:
        return (await self._request("POST", "/goals", json=goal))["goal"]

    async def list_projects(self) -> list[dict[str, Any]]:
        return (await self._request("GET", "/projects"))["projects"]

    async def create_project(self, project: dict[str, Any]) -> dict[str, Any]:
        return (await self._request("POST", "/projects", json=project))["project"]

    # Analytics

    async def analytics(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics")

    async def dashboard(self) -> dict[str, Any]:
        return await self._request("GET", "/dashboard")

    async def timeline(self) -> list[dict[str, Any]]:
        return (await self._request("GET", "/timeline"))["events"]

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        log = logger.bind(step="decision_api_client", method=method, path=path)
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff_multiplier, max=self.backoff_max),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=self._before_sleep,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    response = await self._send(method, path, **kwargs)
        except RetryError as e:
            cause = e.last_attempt.exception()
            attempts = e.last_attempt.attempt_number
            log.error("api_unavailable", attempts=attempts, error=str(cause))
            raise ApiUnavailableError(
                f"{method} {path} failed after {attempts} attempts: {cause}", attempts
            ) from cause

        if response.status_code == 204 or not response.content:
            return None
        return _parse_dates(response.json())

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 500:
            raise _ServerSideError(response)
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise ApiClientError(
                response.status_code,
                body.get("message") or response.reason_phrase,
                body.get("errors") or [],
            )
        return response

    @staticmethod
    def _before_sleep(retry_state: RetryCallState) -> None:
        api_client_retries_total.inc()
        logger.warning(
            "api_request_retry",
            step="decision_api_client",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def close(self):
        """Close the httpx client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _parse_dates(value: Any) -> Any:
    if isinstance(value, list):
        return [_parse_dates(v) for v in value]
    if not isinstance(value, dict):
        return value
    parsed = {}
    for key, item in value.items():
        if key in DATE_KEYS and isinstance(item, str):
            parsed[key] = _to_datetime(item)
        else:
            parsed[key] = _parse_dates(item)
    return parsed


def _to_datetime(text: str) -> datetime | str:
    try:
        return Normalization.parse_datetime(text)
    except ValueError:
        return text
