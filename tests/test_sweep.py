"""Tests for grid loading, candidate building and the sweep engine.

**Feature: sweepgen**
"""

import json
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sweepgen.errors import GridSpecError
from sweepgen.models import Metrics, ParamSet
from sweepgen.sweep import (
    GridSpec,
    build_candidate,
    fixed_clock,
    load_grid,
    resolve_grid,
    run_single,
    run_sweep,
)


def write_grid(tmpdir: str, payload) -> Path:
    path = Path(tmpdir) / "grid.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


class TestCandidateBuilder:
    """
    **Property 10: Candidate Identifiers**

    With a fixed clock, identifiers are fully predictable.
    """

    def test_id_format(self):
        params = ParamSet(donch_n=20, rr_min=1.8, max_spread=2.5, session_filter="london")
        metrics = Metrics(pf_bt=1.6, dd_bt=0.08, trades=1100, winrate=0.515, pnl=3.0)

        candidate = build_candidate("XAUUSD", params, metrics, clock=fixed_clock(1700000000123))

        assert candidate.id == "XAUUSD_donch20_rr1.80_london_1700000000123"
        assert candidate.symbol == "XAUUSD"
        assert candidate.params == params
        assert candidate.metrics == metrics

    def test_clock_read_per_candidate(self):
        stamps = iter([1, 2])
        params = ParamSet(donch_n=30, rr_min=2.257, max_spread=2.0, session_filter="nyopen")

        first = run_single("EURUSD", [], params, clock=lambda: next(stamps))
        second = run_single("EURUSD", [], params, clock=lambda: next(stamps))

        assert first.id == "EURUSD_donch30_rr2.26_nyopen_1"
        assert second.id == "EURUSD_donch30_rr2.26_nyopen_2"

    def test_serialized_field_names(self):
        params = ParamSet(donch_n=20, rr_min=2.0, max_spread=2.5, session_filter="london")
        candidate = run_single("XAUUSD", [], params, clock=fixed_clock(42))

        record = json.loads(candidate.to_json())

        assert list(record) == ["model_id", "symbol", "params", "metrics"]
        assert list(record["params"]) == ["donch_n", "rr_min", "max_spread", "session_filter"]
        assert list(record["metrics"]) == ["pf_bt", "dd_bt", "trades", "winrate", "pnl"]
        assert record["model_id"] == "XAUUSD_donch20_rr2.00_london_42"


class TestSweepOrder:
    """
    **Property 11: Sweep Emission Order**

    *For any* grid, one candidate is produced per combination, with
    donch_n outermost and max_spread innermost.
    """

    def test_two_donch_values(self):
        grid = GridSpec(donch_n=[20, 30], rr_min=[1.8], session_filter=["london"], max_spread=[2.5])

        candidates = run_sweep("XAUUSD", [], grid, clock=fixed_clock(0))

        assert len(candidates) == 2
        assert [c.params.donch_n for c in candidates] == [20, 30]

    def test_nested_order(self):
        grid = GridSpec(
            donch_n=[20, 30],
            rr_min=[1.8, 2.0],
            session_filter=["london", "nyopen"],
            max_spread=[2.0, 2.5],
        )

        keys = [
            (c.params.donch_n, c.params.rr_min, c.params.session_filter, c.params.max_spread)
            for c in run_sweep("XAUUSD", [], grid, clock=fixed_clock(0))
        ]

        expected = [
            (d, r, s, m)
            for d in [20, 30]
            for r in [1.8, 2.0]
            for s in ["london", "nyopen"]
            for m in [2.0, 2.5]
        ]
        assert keys == expected

    def test_default_grid_size(self):
        grid = GridSpec.default()
        assert grid.size == 18
        assert len(run_sweep("XAUUSD", [], grid, clock=fixed_clock(0))) == 18

    @given(
        donch_n=st.lists(st.integers(min_value=0, max_value=200), min_size=1, max_size=4),
        rr_min=st.lists(st.floats(min_value=0.5, max_value=5.0), min_size=1, max_size=3),
        session_filter=st.lists(st.sampled_from(["london", "nyopen", "asia", "x"]), min_size=1, max_size=3),
        max_spread=st.lists(st.floats(min_value=0.0, max_value=5.0), min_size=1, max_size=3),
    )
    @settings(max_examples=50)
    def test_candidate_count_is_product(self, donch_n, rr_min, session_filter, max_spread):
        grid = GridSpec(donch_n=donch_n, rr_min=rr_min, session_filter=session_filter, max_spread=max_spread)

        candidates = run_sweep("SYM", [], grid, clock=fixed_clock(0))

        assert len(candidates) == len(donch_n) * len(rr_min) * len(session_filter) * len(max_spread)
        assert candidates[0].params.donch_n == donch_n[0]
        assert candidates[-1].params.max_spread == max_spread[-1]


class TestGridFile:
    """
    **Property 12: Grid File Replacement**

    A grid file replaces all four dimensions; invalid files fail to load.
    """

    def test_file_replaces_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_grid(tmpdir, {
                "donch_n": [55],
                "rr_min": [3],
                "session_filter": ["asia"],
                "max_spread": [1.0, 1.5],
            })
            grid = resolve_grid(path)

        assert grid.donch_n == [55]
        assert grid.rr_min == [3.0]
        assert grid.session_filter == ["asia"]
        assert grid.max_spread == [1.0, 1.5]
        assert grid.size == 2

    def test_no_file_uses_defaults(self):
        grid = resolve_grid(None)
        assert grid.donch_n == [20, 30, 40]
        assert grid.rr_min == [1.8, 2.0, 2.5]
        assert grid.session_filter == ["london", "nyopen"]
        assert grid.max_spread == [2.5]

    def test_extra_keys_ignored(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_grid(tmpdir, {
                "donch_n": [20],
                "rr_min": [2.0],
                "session_filter": ["london"],
                "max_spread": [2.5],
                "comment": "tight grid",
            })
            assert load_grid(path).size == 1

    @pytest.mark.parametrize("missing", ["donch_n", "rr_min", "session_filter", "max_spread"])
    def test_missing_field_is_error(self, missing):
        payload = {
            "donch_n": [20],
            "rr_min": [2.0],
            "session_filter": ["london"],
            "max_spread": [2.5],
        }
        del payload[missing]

        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_grid(tmpdir, payload)
            with pytest.raises(GridSpecError):
                load_grid(path)

    @pytest.mark.parametrize("payload", [
        {"donch_n": [-1], "rr_min": [2.0], "session_filter": ["london"], "max_spread": [2.5]},
        {"donch_n": [20.5], "rr_min": [2.0], "session_filter": ["london"], "max_spread": [2.5]},
        {"donch_n": ["20"], "rr_min": [2.0], "session_filter": ["london"], "max_spread": [2.5]},
        {"donch_n": [20], "rr_min": ["2.0"], "session_filter": ["london"], "max_spread": [2.5]},
        {"donch_n": [20], "rr_min": [2.0], "session_filter": [1], "max_spread": [2.5]},
        {"donch_n": [], "rr_min": [2.0], "session_filter": ["london"], "max_spread": [2.5]},
        "not json",
    ])
    def test_invalid_content_is_error(self, payload):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_grid(tmpdir, payload)
            with pytest.raises(GridSpecError):
                load_grid(path)

    def test_unreadable_file_raises_os_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OSError):
                load_grid(Path(tmpdir) / "nope.json")
