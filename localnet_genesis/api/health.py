"""Client for the node health API."""

import itertools
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import HealthClientError


logger = logging.getLogger(__name__)

HEALTH_ENDPOINT = "/ext/health"


class CheckResult(BaseModel):
    """Result of one named health check."""
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[Any] = None
    error: Optional[Any] = None
    timestamp: Optional[str] = None
    duration: Optional[int] = None
    contiguous_failures: int = Field(0, alias="contiguousFailures")
    time_of_first_failure: Optional[str] = Field(None, alias="timeOfFirstFailure")


class HealthReply(BaseModel):
    """Reply of the health, readiness and liveness methods."""
    checks: Dict[str, CheckResult] = Field(default_factory=dict)
    healthy: bool

    def failing_checks(self) -> List[str]:
        """Names of checks that report an error."""
        return sorted(name for name, check in self.checks.items() if check.error is not None)


class HealthClient:
    """
    JSON-RPC client for a node's health endpoint.

    Provides the health, readiness and liveness queries, optionally
    restricted to checks carrying the given tags.
    """

    def __init__(self, uri: str, timeout: float = 10):
        """
        Initialize health client.

        Args:
            uri: Base URI of the node, e.g. http://127.0.0.1:9650
            timeout: Request timeout in seconds
        """
        self.url = uri.rstrip('/') + HEALTH_ENDPOINT
        self.timeout = timeout
        self._ids = itertools.count(1)

    def health(self, tags: Optional[List[str]] = None) -> HealthReply:
        """Overall node health."""
        return self._call("health.health", tags)

    def readiness(self, tags: Optional[List[str]] = None) -> HealthReply:
        """Whether the node finished initializing."""
        return self._call("health.readiness", tags)

    def liveness(self, tags: Optional[List[str]] = None) -> HealthReply:
        """Whether the node is running and should not be restarted."""
        return self._call("health.liveness", tags)

    def _call(self, method: str, tags: Optional[List[str]]) -> HealthReply:
        request_data = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": {"tags": list(tags or [])},
        }

        try:
            response = requests.post(self.url, json=request_data, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"{method} request to {self.url} failed: {e}")
            raise HealthClientError(f"{method} request failed: {e}") from e

        if not isinstance(body, dict):
            raise HealthClientError(f"{method} returned non-object response")

        error = body.get("error")
        if error:
            if isinstance(error, dict):
                raise HealthClientError(f"{method} returned error {error.get('code')}: {error.get('message')}")
            raise HealthClientError(f"{method} returned error: {error}")

        try:
            reply = HealthReply.model_validate(body.get("result") or {})
        except ValidationError as e:
            raise HealthClientError(f"{method} returned malformed result: {e}") from e

        logger.debug(f"{method}: healthy={reply.healthy}")
        return reply
