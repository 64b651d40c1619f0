"""STOMP broker probe (stomp.py).

Why a wrapper:
- Turns a broker URL ("tcp://host:61613", "failover:(...)") into stomp.py
  connection parameters.
- Maps every library/socket failure to `ProbeConnectionError` so the Core
  never sees stomp.py exceptions.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

import stomp
from stomp.exception import StompException

from core.domain.errors import ProbeConnectionError

logger = logging.getLogger(__name__)

PLAIN_SCHEMES = ("tcp", "stomp")
TLS_SCHEMES = ("ssl", "stomp+ssl", "tls")

_FAILOVER = re.compile(r"^failover:(?://)?\((?P<uris>[^)]*)\)(?:\?.*)?$")

# Single probe subscription per connection.
_SUBSCRIPTION_ID = "validation-probe"


@dataclass(frozen=True)
class BrokerEndpoint:
    host: str
    port: int
    tls: bool = False


def _parse_single(uri: str) -> BrokerEndpoint:
    parts = urlsplit(uri.strip())
    scheme = parts.scheme.lower()
    if scheme not in PLAIN_SCHEMES + TLS_SCHEMES:
        raise ValueError(f"unsupported broker scheme in {uri!r}")
    try:
        port = parts.port
    except ValueError as exc:
        raise ValueError(f"invalid port in {uri!r}") from exc
    if not parts.hostname or port is None:
        raise ValueError(f"broker URL needs a host and a port: {uri!r}")
    return BrokerEndpoint(host=parts.hostname, port=port, tls=scheme in TLS_SCHEMES)


def parse_broker_url(broker_url: str) -> list[BrokerEndpoint]:
    """Parse a broker URL into endpoints.

    Accepted:
    - tcp://host:port, stomp://host:port
    - ssl://host:port (TLS)
    - failover:(tcp://a:61613,tcp://b:61613)
    """

    value = (broker_url or "").strip()
    if not value:
        raise ValueError("broker URL is empty")

    match = _FAILOVER.match(value)
    if match:
        uris = [u for u in match.group("uris").split(",") if u.strip()]
        if not uris:
            raise ValueError(f"failover URL without endpoints: {broker_url!r}")
        return [_parse_single(u) for u in uris]

    return [_parse_single(value)]


class StompBrokerClient:
    """`BrokerClient` backed by a `stomp.Connection`."""

    def __init__(self, broker_url: str, *, timeout: float) -> None:
        endpoints = parse_broker_url(broker_url)
        hosts = [(e.host, e.port) for e in endpoints]

        self._broker_url = broker_url
        self._subscribed = False
        self._conn = stomp.Connection(
            host_and_ports=hosts,
            timeout=timeout,
            reconnect_attempts_max=1,
            heartbeats=(0, 0),
        )
        tls_hosts = [(e.host, e.port) for e in endpoints if e.tls]
        if tls_hosts:
            self._conn.set_ssl(for_hosts=tls_hosts)

    def connect(self) -> None:
        try:
            self._conn.connect(wait=True)
        except (StompException, OSError) as exc:
            raise ProbeConnectionError(f"cannot connect to {self._broker_url}: {exc}") from exc
        logger.debug("Connected to broker %s", self._broker_url)

    def subscribe(self, destination: str) -> None:
        try:
            self._conn.subscribe(destination=destination, id=_SUBSCRIPTION_ID, ack="auto")
        except (StompException, OSError) as exc:
            raise ProbeConnectionError(f"cannot subscribe to {destination}: {exc}") from exc
        self._subscribed = True

    def unsubscribe(self) -> None:
        if not self._subscribed:
            return
        try:
            self._conn.unsubscribe(id=_SUBSCRIPTION_ID)
        except (StompException, OSError) as exc:
            raise ProbeConnectionError(f"cannot unsubscribe: {exc}") from exc
        self._subscribed = False

    def disconnect(self) -> None:
        if not self._conn.is_connected():
            return
        try:
            self._conn.disconnect()
        except (StompException, OSError) as exc:
            raise ProbeConnectionError(f"cannot disconnect from {self._broker_url}: {exc}") from exc


def build_broker_client(broker_url: str, *, timeout: float) -> StompBrokerClient:
    """Default `BrokerClientFactory`."""

    return StompBrokerClient(broker_url, timeout=timeout)
