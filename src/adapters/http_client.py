"""httpx wrapper.

Why a wrapper:
- Standardises timeouts, headers and redirect policy for every backend call.
- Makes testing easy: a mock transport can be injected instead of the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralises timeouts/headers so every operation behaves the same.
    - `transport` is the seam tests use to stand in for the backend.

    The client is created without a cookie jar of its own: session cookies
    are attached explicitly, per operation, by the resource client.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )
