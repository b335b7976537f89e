"""Generate command for SweepGen CLI.

Loads ticks, builds candles and evaluates either a single parameter
combination or a full parameter sweep.
"""

import json
from pathlib import Path
from typing import Optional

import click

from sweepgen.cli.common import fail, get_config, resolve_out_dir
from sweepgen.data import aggregate, get_parse_policy, load_ticks
from sweepgen.errors import SweepgenError
from sweepgen.models import ParamSet
from sweepgen.output import CandidateStore
from sweepgen.strategy import get_metrics_model
from sweepgen.sweep import resolve_grid, run_single, run_sweep

SINGLE_RUN_OPTIONS = (
    ("donch_n", "--donch-n"),
    ("rr_min", "--rr-min"),
    ("max_spread", "--max-spread"),
    ("session_filter", "--session-filter"),
)


def require_single_run_params(**values) -> ParamSet:
    """Build a ``ParamSet`` from single-run options.

    Raises:
        click.UsageError: Naming the first missing option.
    """
    for name, flag in SINGLE_RUN_OPTIONS:
        if values.get(name) is None:
            raise click.UsageError(f"{flag} is required in single-run mode (no --sweep)")
    return ParamSet(**values)


def sweep_summary(generated: int, top_kept: int) -> str:
    """Compact JSON summary printed after a sweep."""
    return json.dumps(
        {"ok": True, "generated": generated, "top_kept": top_kept},
        separators=(",", ":"),
    )


@click.command()
@click.option("--symbol", required=True, help="Instrument symbol, e.g. XAUUSD.")
@click.option(
    "--ticks-file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Tick CSV with columns ts_ms,bid,ask.",
)
@click.option("--donch-n", type=click.IntRange(min=0), default=None, help="Donchian length (single-run only).")
@click.option("--rr-min", type=float, default=None, help="Minimum reward/risk (single-run only).")
@click.option("--max-spread", type=float, default=None, help="Maximum spread (single-run only).")
@click.option("--session-filter", default=None, help="Session label (single-run only).")
@click.option("--sweep", is_flag=True, help="Run a parameter sweep instead of a single run.")
@click.option(
    "--grid-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON grid for sweep mode; replaces the built-in grid.",
)
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory for sweep files (default from config: ./out).",
)
@click.option("--top-k", type=click.IntRange(min=0), default=None, help="Number of top candidates to keep (default: 5).")
@click.option("--interval-ms", type=click.IntRange(min=1), default=None, help="Candle width in ms (default: 60000).")
@click.pass_context
def generate(
    ctx: click.Context,
    symbol: str,
    ticks_file: Path,
    donch_n: Optional[int],
    rr_min: Optional[float],
    max_spread: Optional[float],
    session_filter: Optional[str],
    sweep: bool,
    grid_file: Optional[Path],
    out_dir: Optional[Path],
    top_k: Optional[int],
    interval_ms: Optional[int],
) -> None:
    """Generate strategy candidates from tick data.

    Without --sweep, all four strategy parameters are required and one
    candidate is printed as JSON. With --sweep, every combination of the
    grid is evaluated, the full and top-K lists are written as JSON lines
    and a summary is printed.

    \b
    Examples:
      sweepgen generate --symbol XAUUSD --ticks-file ticks.csv --sweep
      sweepgen generate --symbol XAUUSD --ticks-file ticks.csv --sweep --grid-file grid.json
      sweepgen generate --symbol XAUUSD --ticks-file ticks.csv \\
          --donch-n 20 --rr-min 2.0 --max-spread 2.5 --session-filter london
    """
    config = get_config(ctx)

    params = None
    if not sweep:
        params = require_single_run_params(
            donch_n=donch_n,
            rr_min=rr_min,
            max_spread=max_spread,
            session_filter=session_filter,
        )

    if interval_ms is None:
        interval_ms = config["candles"]["interval_ms"]
    if top_k is None:
        top_k = config["ranking"]["top_k"]

    try:
        policy = get_parse_policy(config["parsing"]["policy"])
        model = get_metrics_model(config["strategy"]["model"])
    except ValueError as e:
        fail(str(e), title="Configuration Error")

    try:
        ticks = load_ticks(ticks_file, policy=policy)
        candles = aggregate(ticks, interval_ms)

        if params is not None:
            candidate = run_single(symbol, candles, params, model=model)
            click.echo(candidate.to_json(indent=2))
            return

        grid = resolve_grid(grid_file)
        candidates = run_sweep(symbol, candles, grid, model=model)

        store = CandidateStore(resolve_out_dir(ctx, out_dir))
        store.write_all(candidates)
        kept = store.write_top(candidates, top_k)
    except (OSError, UnicodeDecodeError, SweepgenError) as e:
        fail(str(e))

    click.echo(sweep_summary(len(candidates), kept))
