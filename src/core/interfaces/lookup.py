"""URI lookup service (Gemini) client contract."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LookupClient(Protocol):
    def find_by_uri(self, uri: str) -> dict[str, Any] | None:
        """Resolve a repository URI.

        Returns the service payload, or `None` when the service answered but
        knows nothing about `uri`. Raises `ProbeConnectionError` when the
        service cannot be reached.
        """

        ...


class LookupClientFactory(Protocol):
    def __call__(self, base_url: str, logger: logging.Logger, *, timeout: float) -> LookupClient:
        """Build a client. Raises `ValueError` when `base_url` is not a usable URL."""

        ...
