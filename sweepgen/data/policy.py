"""Numeric parsing policies for tick rows.

The tick loader never decides on its own what to do with a field that does
not parse; it asks a policy. ``ParseOrZero`` keeps the historical lenient
behaviour (bad values become zero), ``StrictParse`` rejects them.
"""

import re
from abc import ABC, abstractmethod

from sweepgen.errors import TickParseError

_UINT_RE = re.compile(r"^\+?[0-9]+$")
_UINT64_MAX = 2**64 - 1


def _parse_uint(text: str) -> int | None:
    if not _UINT_RE.match(text):
        return None
    value = int(text)
    if value > _UINT64_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    # float() tolerates surrounding whitespace, digit underscores and
    # non-ASCII digits; none of these are valid prices
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class ParsePolicy(ABC):
    """Decides how raw tick fields are converted to numbers."""

    name: str = ""

    @abstractmethod
    def parse_timestamp(self, text: str, line_no: int) -> int:
        """Parse an unsigned millisecond timestamp."""

    @abstractmethod
    def parse_price(self, text: str, field: str, line_no: int) -> float:
        """Parse a bid or ask price."""


class ParseOrZero(ParsePolicy):
    """Lenient policy: unparsable values silently become zero."""

    name = "lenient"

    def parse_timestamp(self, text: str, line_no: int) -> int:
        value = _parse_uint(text)
        return 0 if value is None else value

    def parse_price(self, text: str, field: str, line_no: int) -> float:
        value = _parse_float(text)
        return 0.0 if value is None else value


class StrictParse(ParsePolicy):
    """Strict policy: unparsable values raise ``TickParseError``."""

    name = "strict"

    def parse_timestamp(self, text: str, line_no: int) -> int:
        value = _parse_uint(text)
        if value is None:
            raise TickParseError(line_no, "timestamp_ms", text)
        return value

    def parse_price(self, text: str, field: str, line_no: int) -> float:
        value = _parse_float(text)
        if value is None:
            raise TickParseError(line_no, field, text)
        return value


PARSE_POLICIES: dict[str, type[ParsePolicy]] = {
    ParseOrZero.name: ParseOrZero,
    StrictParse.name: StrictParse,
}


def get_parse_policy(name: str) -> ParsePolicy:
    """Look up a parsing policy by name.

    Raises:
        ValueError: If no policy is registered under ``name``.
    """
    try:
        return PARSE_POLICIES[name]()
    except KeyError:
        valid = ", ".join(sorted(PARSE_POLICIES))
        raise ValueError(f"Unknown parsing policy '{name}' (expected one of: {valid})") from None
