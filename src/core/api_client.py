"""
Lesson schedule API client setup with lazy initialization.
"""

import logging
from collections.abc import Awaitable, Callable

import httpx

from core.config import API_BASE_URL, API_TIMEOUT_SECONDS, API_TOKEN

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]
UnauthorizedHandler = Callable[[httpx.Response], Awaitable[None] | None]

_api_client: httpx.AsyncClient | None = None


def _configured_token() -> str:
    return API_TOKEN


def build_api_client(
    base_url: str = API_BASE_URL,
    token_provider: TokenProvider | None = None,
    timeout: float = API_TIMEOUT_SECONDS,
    on_unauthorized: UnauthorizedHandler | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient for the lesson schedule API.

    Every request gets `Authorization: Bearer <token>` when the token provider
    returns one. A 401 response is logged and handed to `on_unauthorized`;
    the response itself is returned unchanged so callers still see the status.
    """
    if token_provider is None:
        token_provider = _configured_token

    async def attach_token(request: httpx.Request) -> None:
        token = token_provider()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def check_unauthorized(response: httpx.Response) -> None:
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return
        logger.error(
            "Authentication failed for %s %s: token expired or invalid",
            response.request.method,
            response.request.url,
        )
        if on_unauthorized is not None:
            result = on_unauthorized(response)
            if result is not None:
                await result

    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={"Content-Type": "application/json"},
        event_hooks={"request": [attach_token], "response": [check_unauthorized]},
        transport=transport,
    )


def get_api_client() -> httpx.AsyncClient:
    """Get or create the shared API client (lazy initialization)."""
    global _api_client
    if _api_client is None or _api_client.is_closed:
        _api_client = build_api_client()
    return _api_client
