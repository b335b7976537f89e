"""Parameter sweeps, candidate building and ranking."""

from sweepgen.sweep.engine import (
    Clock,
    build_candidate,
    fixed_clock,
    make_candidate_id,
    run_single,
    run_sweep,
    system_clock,
)
from sweepgen.sweep.grid import GridSpec, load_grid, resolve_grid
from sweepgen.sweep.ranking import rank_candidates, score, top_candidates

__all__ = [
    "Clock",
    "build_candidate",
    "fixed_clock",
    "make_candidate_id",
    "run_single",
    "run_sweep",
    "system_clock",
    "GridSpec",
    "load_grid",
    "resolve_grid",
    "rank_candidates",
    "score",
    "top_candidates",
]
