"""Tick CSV loader.

Reads ``timestamp_ms,bid,ask`` rows. The first line is skipped when it looks
like a header (contains ``ts_ms``, ``bid`` and ``ask``). Rows with fewer than
three fields are dropped. Numeric conversion is left to a ``ParsePolicy``.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from sweepgen.data.policy import ParseOrZero, ParsePolicy
from sweepgen.models import Tick

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("ts_ms", "bid", "ask")


def is_header(line: str) -> bool:
    """Check whether a line looks like the CSV header row."""
    return all(name in line for name in HEADER_FIELDS)


def parse_ticks(lines: Iterable[str], policy: Optional[ParsePolicy] = None) -> list[Tick]:
    """Parse tick rows from an iterable of text lines.

    Args:
        lines: Raw lines, with or without trailing newlines.
        policy: Numeric parsing policy. Defaults to ``ParseOrZero``.

    Returns:
        Ticks in input order. No sorting is applied.
    """
    policy = policy or ParseOrZero()
    ticks: list[Tick] = []
    dropped = 0

    for index, raw in enumerate(lines):
        line = raw.rstrip("\r\n")
        if index == 0 and is_header(line):
            continue

        parts = line.split(",")
        if len(parts) < 3:
            dropped += 1
            continue

        line_no = index + 1
        ticks.append(Tick(
            timestamp_ms=policy.parse_timestamp(parts[0].strip(), line_no),
            bid=policy.parse_price(parts[1].strip(), "bid", line_no),
            ask=policy.parse_price(parts[2].strip(), "ask", line_no),
        ))

    if dropped:
        logger.debug("Dropped %d rows with fewer than 3 fields", dropped)
    return ticks


def load_ticks(path: Path, policy: Optional[ParsePolicy] = None) -> list[Tick]:
    """Load ticks from a CSV file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8", newline="\n") as f:
        ticks = parse_ticks(f, policy=policy)
    logger.info("Loaded %d ticks from %s", len(ticks), path)
    return ticks
