"""Natural-language date parsing (dateparser).

Understands relative expressions such as "2 days", "10 hours" or
"3 minutes" as well as absolute dates. A few relative forms that
`strtotime`-style parsers accept and dateparser does not are rewritten
first:

- a sign in front of the number ("-1 day", "+3 weeks")
- fortnights ("5 fortnights" -> "10 weeks")
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Sequence

import dateparser

_LEADING_SIGN = re.compile(r"^\s*[+-]\s*(?=\d)")
_FORTNIGHTS = re.compile(r"\b(\d+)\s*(?:fortnight|forthnight)s?\b", re.IGNORECASE)


def to_dateparser_text(text: str) -> str:
    """Rewrite relative forms dateparser does not know into ones it does."""

    rewritten = _LEADING_SIGN.sub("", text)
    return _FORTNIGHTS.sub(lambda m: f"{int(m.group(1)) * 2} weeks", rewritten)


class DateparserExpressionParser:
    """`DateExpressionParser` backed by `dateparser.parse`."""

    def __init__(self, languages: Sequence[str] = ("en",)) -> None:
        self._languages = list(languages)
        self._settings = {
            "RETURN_AS_TIMEZONE_AWARE": False,
            "STRICT_PARSING": False,
        }

    def parse(self, text: str) -> datetime | None:
        if not text or not text.strip():
            return None
        return dateparser.parse(
            to_dateparser_text(text),
            languages=self._languages,
            settings=self._settings,
        )
