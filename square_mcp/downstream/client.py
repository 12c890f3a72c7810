"""Square REST client.

A thin transport over httpx: it attaches authentication and versioning
headers, sends one request, and returns the status code and the raw
response text.  Interpreting the status is left to the handlers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from square_mcp.config import PRODUCTION_BASE_URL

logger = logging.getLogger(__name__)

USER_AGENT = "Square-MCP-Server/1.0.0"


@dataclass
class SquareClient:
    """HTTP client for the Square REST API with bearer-token auth."""

    base_url: str = PRODUCTION_BASE_URL
    square_version: str = "2025-04-16"
    timeout: float = 30.0
    user_agent: str = USER_AGENT
    transport: httpx.AsyncBaseTransport | None = None

    # ------------------------------------------------------------------
    # Networking helpers
    # ------------------------------------------------------------------

    def _headers(self, token: str) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "Square-Version": self.square_version,
            "User-Agent": self.user_agent,
        }

    async def invoke(
        self,
        endpoint: str,
        http_method: str,
        token: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> tuple[int, str]:
        """Send one request to ``endpoint`` and return ``(status, text)``.

        ``body`` is JSON-encoded when non-empty; ``params`` become the
        query string.  Transport failures (DNS, connect, timeout) propagate
        as :class:`httpx.HTTPError`.
        """
        url = f"{self.base_url}{endpoint}"
        content = json.dumps(body) if body else None
        logger.info("Square call → %s %s", http_method, endpoint)

        # Clients are created per call; the gateway keeps no connection state
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            response = await client.request(
                http_method,
                url,
                headers=self._headers(token),
                params=_query_params(params),
                content=content,
            )

        logger.info(
            "Square response ← %s %s: %s",
            http_method,
            endpoint,
            response.status_code,
        )
        return response.status_code, response.text


def _query_params(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Flatten request values into query-string form."""
    if not params:
        return None
    flattened: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            flattened[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            flattened[key] = ",".join(str(item) for item in value)
        elif isinstance(value, dict):
            flattened[key] = json.dumps(value)
        else:
            flattened[key] = str(value)
    return flattened
