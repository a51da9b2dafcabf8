"""Single-shot authenticated GET against the Escavador API.

One request per call (redirects are followed), no retries: every failure is
classified into an ``EscavadorError`` and returned inside the ``FetchResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from escavador.errors import (
    MSG_PROCESSO_NAO_ENCONTRADO,
    EscavadorError,
    HttpFailureError,
    InsufficientCreditError,
    InvalidTokenError,
    NotFoundError,
    UnexpectedResponseError,
)

logger = logging.getLogger(__name__)

# The API rejects requests without a browser-like user agent.
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

_TIMEOUT = httpx.Timeout(60.0)


@dataclass
class FetchResult:
    """Either the decoded JSON body or the classified error."""

    body: Any = None
    error: EscavadorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def request_headers(token: str) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
        "X-Requested-With": "XMLHttpRequest",
        "User-Agent": USER_AGENT,
    }


def classify_status(
    status_code: int, not_found_message: str = MSG_PROCESSO_NAO_ENCONTRADO
) -> EscavadorError | None:
    """Map an HTTP status to its error, or ``None`` for 2xx."""
    if 200 <= status_code < 300:
        return None
    if status_code == 401:
        return InvalidTokenError()
    if status_code == 402:
        return InsufficientCreditError()
    if status_code == 404:
        return NotFoundError(not_found_message)
    return HttpFailureError(f"Falha HTTP {status_code}", status_code=status_code)


class HttpFetcher:
    """GET JSON documents from the API.

    ``transport`` replaces the network layer (``httpx.MockTransport`` in
    tests); by default httpx opens real connections.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def get(
        self,
        url: str,
        token: str,
        *,
        not_found_message: str = MSG_PROCESSO_NAO_ENCONTRADO,
    ) -> FetchResult:
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=_TIMEOUT, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=request_headers(token))
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed: %r", url, exc)
            detail = str(exc) or type(exc).__name__
            return FetchResult(error=HttpFailureError(f"Falha de conexão: {detail}"))

        error = classify_status(response.status_code, not_found_message)
        if error is not None:
            logger.warning("GET %s returned %d (%s)", url, response.status_code, error.kind)
            return FetchResult(error=error)

        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("GET %s returned a non-JSON body: %s", url, exc)
            return FetchResult(
                error=UnexpectedResponseError(
                    f"Resposta inválida da API: {exc}", status_code=response.status_code
                )
            )
        return FetchResult(body=body)
