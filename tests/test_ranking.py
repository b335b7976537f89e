"""Tests for candidate ranking and the JSONL output store.

**Feature: sweepgen**
"""

import json
import math
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sweepgen.models import Candidate, Metrics, ParamSet
from sweepgen.output import CandidateStore, read_candidates
from sweepgen.sweep import GridSpec, fixed_clock, rank_candidates, run_sweep, score, top_candidates


def make_candidate(tag: str, pf: float, dd: float) -> Candidate:
    return Candidate(
        id=tag,
        symbol="XAUUSD",
        params=ParamSet(donch_n=20, rr_min=2.0, max_spread=2.5, session_filter="london"),
        metrics=Metrics(pf_bt=pf, dd_bt=dd, trades=1000, winrate=0.5, pnl=1.0),
    )


class TestScore:
    """
    **Property 13: Score Formula**
    """

    def test_score_rewards_pf_and_punishes_dd(self):
        assert score(make_candidate("a", 1.7, 0.09)) == pytest.approx(0.8)
        assert score(make_candidate("b", 2.0, 0.0)) == 2.0


class TestRanking:
    """
    **Property 14: Ranking Order**

    *For any* candidates, ranking is non-increasing by score and equal
    scores keep their original order.
    """

    @given(
        scores=st.lists(
            st.tuples(st.floats(min_value=0.0, max_value=3.0), st.sampled_from([0.0, 0.05, 0.1])),
            max_size=40,
        )
    )
    @settings(max_examples=100)
    def test_sorted_non_increasing(self, scores):
        candidates = [make_candidate(str(i), pf, dd) for i, (pf, dd) in enumerate(scores)]

        ranked = rank_candidates(candidates)

        assert len(ranked) == len(candidates)
        values = [score(c) for c in ranked]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_ties_keep_emission_order(self):
        candidates = [
            make_candidate("first", 1.5, 0.05),
            make_candidate("better", 2.0, 0.05),
            make_candidate("second", 1.5, 0.05),
            make_candidate("third", 1.5, 0.05),
        ]

        ranked = rank_candidates(candidates)

        assert [c.id for c in ranked] == ["better", "first", "second", "third"]

    def test_nan_scores_last(self):
        candidates = [
            make_candidate("nan", math.nan, 0.0),
            make_candidate("low", 0.5, 0.0),
            make_candidate("high", 1.5, 0.0),
        ]

        assert [c.id for c in rank_candidates(candidates)] == ["high", "low", "nan"]

    def test_input_not_mutated(self):
        candidates = [make_candidate("a", 1.0, 0.0), make_candidate("b", 2.0, 0.0)]
        rank_candidates(candidates)
        assert [c.id for c in candidates] == ["a", "b"]

    @pytest.mark.parametrize("k, expected", [(0, 0), (2, 2), (5, 3), (10, 3)])
    def test_top_k_clamped(self, k, expected):
        candidates = [make_candidate(str(i), 1.0 + i, 0.0) for i in range(3)]
        assert len(top_candidates(candidates, k)) == expected

    def test_negative_k_rejected(self):
        with pytest.raises(ValueError):
            top_candidates([], -1)


class TestCandidateStore:
    """
    **Property 15: Output Files**

    The full file keeps sweep order; the top file holds min(K, N) ranked
    candidates. Both use one compact JSON object per line.
    """

    def test_write_sweep_outputs(self):
        grid = GridSpec.default()
        candidates = run_sweep("XAUUSD", [], grid, clock=fixed_clock(1000))

        with tempfile.TemporaryDirectory() as tmpdir:
            store = CandidateStore(Path(tmpdir) / "nested" / "out")
            path = store.write_all(candidates)
            kept = store.write_top(candidates, 5)

            lines = path.read_text(encoding="utf-8").splitlines()
            top_lines = store.top_candidates_path.read_text(encoding="utf-8").splitlines()
            round_tripped = store.read_all()
            top = store.read_top()

        assert kept == 5
        assert len(lines) == 18
        assert len(top_lines) == 5
        assert [json.loads(line)["model_id"] for line in lines] == [c.id for c in candidates]
        assert round_tripped == candidates
        assert top == rank_candidates(candidates)[:5]
        assert all(": " not in line for line in lines)

    def test_top_k_larger_than_population(self):
        candidates = [make_candidate("only", 1.0, 0.0)]

        with tempfile.TemporaryDirectory() as tmpdir:
            store = CandidateStore(Path(tmpdir))
            kept = store.write_top(candidates, 5)
            assert kept == 1
            assert len(read_candidates(store.top_candidates_path)) == 1

    def test_empty_population_writes_empty_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = CandidateStore(Path(tmpdir))
            store.write_all([])
            assert store.write_top([], 5) == 0
            assert store.candidates_path.read_text(encoding="utf-8") == ""
            assert store.top_candidates_path.read_text(encoding="utf-8") == ""
