"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy for outgoing requests.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    base_url: str | httpx.URL = "",
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Why a builder:
    - Every probe behaves the same (timeout, User-Agent).
    - Tests swap the network for a mock transport in one place.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout if timeout is not None else settings.lookup_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
