"""Gemini lookup-service client (httpx).

Gemini maps repository URIs (Drupal/Fedora) to each other. The only call
needed here is the by-URI lookup:

- GET {base_url}/by_uri with header `X-Islandora-URI: <uri>`
- 200 => JSON mapping (e.g. {"drupal": ..., "fedora": ...})
- 404 => URI unknown to the service

Request failures (refused, DNS, timeouts, undecodable bodies) become
`ProbeConnectionError`. A redirect loop still counts as an answer.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import ProbeConnectionError

URI_HEADER = "X-Islandora-URI"


def parse_base_url(value: str) -> httpx.URL:
    """Parse an absolute http(s) URL or raise `ValueError`."""

    try:
        url = httpx.URL(value.strip())
    except httpx.InvalidURL as exc:
        raise ValueError(f"cannot parse URL {value!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"not an absolute http(s) URL: {value!r}")
    return url


class GeminiClient:
    """`LookupClient` for a Gemini service."""

    def __init__(
        self,
        base_url: str,
        logger: logging.Logger,
        *,
        timeout: float,
        settings: AppSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = parse_base_url(base_url)
        self._logger = logger
        self._timeout = timeout
        self._settings = settings
        self._transport = transport

    @classmethod
    def create(cls, base_url: str, logger: logging.Logger, *, timeout: float) -> "GeminiClient":
        """Default `LookupClientFactory`."""

        return cls(base_url, logger, timeout=timeout)

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    def find_by_uri(self, uri: str) -> dict[str, Any] | None:
        try:
            with build_client(
                self._settings,
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.get("by_uri", headers={URI_HEADER: uri})
        except httpx.TooManyRedirects:
            # The service answered, only with redirects.
            self._logger.warning("Gemini lookup for %s ended in a redirect loop", uri)
            return None
        except httpx.RequestError as exc:
            self._logger.error("Gemini at %s is unreachable: %s", self._base_url, exc)
            raise ProbeConnectionError(f"cannot connect to {self._base_url}: {exc}") from exc

        if response.status_code == 404:
            self._logger.debug("Gemini has no mapping for %s", uri)
            return None
        if response.status_code != 200:
            self._logger.warning("Gemini lookup for %s returned HTTP %s", uri, response.status_code)
            return None

        try:
            payload = response.json()
        except ValueError:
            self._logger.warning("Gemini lookup for %s returned a non-JSON body", uri)
            return None
        return payload if isinstance(payload, dict) else None
