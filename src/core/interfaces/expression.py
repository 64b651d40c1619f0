"""Natural-language date/time parser contract."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class DateExpressionParser(Protocol):
    def parse(self, text: str) -> datetime | None:
        """Return the moment `text` denotes, or `None` when it is not understood."""

        ...
