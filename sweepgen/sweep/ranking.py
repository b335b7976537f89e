"""Candidate scoring and ranking."""

import math
from typing import Sequence

from sweepgen.models import Candidate


def score(candidate: Candidate) -> float:
    """Ranking score: profit factor minus ten times max drawdown."""
    return candidate.score


def _rank_key(candidate: Candidate) -> tuple[bool, float]:
    value = score(candidate)
    if math.isnan(value):
        return (False, 0.0)
    return (True, value)


def rank_candidates(candidates: Sequence[Candidate]) -> list[Candidate]:
    """Sort candidates by descending score.

    The sort is stable: candidates with exactly equal scores keep their
    input (sweep emission) order. NaN scores sort after all others.
    """
    return sorted(candidates, key=_rank_key, reverse=True)


def top_candidates(candidates: Sequence[Candidate], k: int) -> list[Candidate]:
    """Return the ``k`` best candidates, or all of them if fewer exist.

    Raises:
        ValueError: If ``k`` is negative.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return rank_candidates(candidates)[:k]
