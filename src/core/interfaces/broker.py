"""Message broker client contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The STOMP adapter and the test fakes are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BrokerClient(Protocol):
    """Minimal capability set needed to probe a broker.

    Design rules:
    - Calls are blocking; the adapter applies its own timeout.
    - Any failure surfaces as an exception, never as a return value.
    """

    def connect(self) -> None:
        ...

    def subscribe(self, destination: str) -> None:
        ...

    def unsubscribe(self) -> None:
        ...

    def disconnect(self) -> None:
        ...


class BrokerClientFactory(Protocol):
    def __call__(self, broker_url: str, *, timeout: float) -> BrokerClient:
        """Build a client for `broker_url`. May raise on a malformed URL."""

        ...
