"""Generic REST handlers bound to one Square endpoint each.

A handler is the ``(credential, request) -> text`` coroutine stored in a
:class:`~square_mcp.registry.models.MethodDescriptor`.  The request body
is forwarded as-is apart from path parameters, which are substituted into
the endpoint path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

from square_mcp.core.errors import DownstreamError
from square_mcp.downstream.client import SquareClient

logger = logging.getLogger(__name__)

# Verbs whose payload travels in the query string unless a handler overrides it
QUERY_VERBS = frozenset({"GET", "DELETE"})


def _reason(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


@dataclass(frozen=True)
class RestHandler:
    """Calls ``http_method path`` on the Square API for one registry entry."""

    client: SquareClient
    http_method: str
    path: str
    path_params: tuple[str, ...] = ()
    query_verbs: frozenset[str] = QUERY_VERBS

    def _resolve(self, request: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Fill path placeholders from ``request``; return path and the rest."""
        payload = dict(request)
        values: dict[str, str] = {}
        for name in self.path_params:
            if payload.get(name) in (None, ""):
                raise ValueError(
                    f"Missing path parameter '{name}' for {self.http_method} {self.path}"
                )
            values[name] = quote(str(payload.pop(name)), safe="")
        return self.path.format(**values), payload

    async def __call__(self, credential: str, request: dict[str, Any]) -> str:
        endpoint, payload = self._resolve(request)

        if self.http_method in self.query_verbs:
            status, text = await self.client.invoke(
                endpoint, self.http_method, credential, params=payload
            )
        else:
            status, text = await self.client.invoke(
                endpoint, self.http_method, credential, body=payload
            )

        if not 200 <= status < 300:
            logger.error("Square API returned %s for %s %s", status, self.http_method, endpoint)
            raise DownstreamError(status, _reason(status), text)
        return text
