"""Output files for SweepGen."""

from sweepgen.output.store import (
    CANDIDATES_FILE,
    DEFAULT_OUT_DIR,
    TOP_CANDIDATES_FILE,
    CandidateStore,
    read_candidates,
)

__all__ = [
    "CANDIDATES_FILE",
    "DEFAULT_OUT_DIR",
    "TOP_CANDIDATES_FILE",
    "CandidateStore",
    "read_candidates",
]
