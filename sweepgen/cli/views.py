"""Inspection commands for SweepGen CLI.

Renders aggregated candles and ranked candidates as tables.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from sweepgen.cli.common import console, fail, get_config, resolve_out_dir
from sweepgen.data import aggregate, get_parse_policy, load_ticks
from sweepgen.errors import SweepgenError
from sweepgen.output import CandidateStore


def _format_ms(timestamp_ms: int) -> str:
    """Format epoch milliseconds as a UTC time string."""
    try:
        moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        # Out of datetime range; show the raw value
        return str(timestamp_ms)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@click.command()
@click.option(
    "--ticks-file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Tick CSV with columns ts_ms,bid,ask.",
)
@click.option("--interval-ms", type=click.IntRange(min=1), default=None, help="Candle width in ms (default: 60000).")
@click.option("-n", "--limit", type=click.IntRange(min=1), default=20, help="Show the last N candles (default: 20).")
@click.pass_context
def candles(ctx: click.Context, ticks_file: Path, interval_ms: Optional[int], limit: int) -> None:
    """Show candles aggregated from a tick file.

    \b
    Examples:
      sweepgen candles --ticks-file ticks.csv
      sweepgen candles --ticks-file ticks.csv --interval-ms 300000 -n 50
    """
    config = get_config(ctx)
    if interval_ms is None:
        interval_ms = config["candles"]["interval_ms"]

    try:
        policy = get_parse_policy(config["parsing"]["policy"])
    except ValueError as e:
        fail(str(e), title="Configuration Error")

    try:
        ticks = load_ticks(ticks_file, policy=policy)
    except (OSError, UnicodeDecodeError, SweepgenError) as e:
        fail(str(e))

    result = aggregate(ticks, interval_ms)
    if not result:
        console.print("[yellow]No ticks found.[/yellow]")
        return

    table = Table(title=f"{len(result)} candles from {len(ticks)} ticks ({interval_ms} ms)")
    table.add_column("Start (UTC)", style="cyan")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right", style="green")
    table.add_column("Low", justify="right", style="red")
    table.add_column("Close", justify="right")
    table.add_column("Avg Spread", justify="right", style="dim")

    for candle in result[-limit:]:
        table.add_row(
            _format_ms(candle.window_start_ms),
            f"{candle.open:.5f}",
            f"{candle.high:.5f}",
            f"{candle.low:.5f}",
            f"{candle.close:.5f}",
            f"{candle.avg_spread:.5f}",
        )

    console.print(table)


@click.command()
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding sweep output (default from config: ./out).",
)
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Show at most N candidates.")
@click.pass_context
def top(ctx: click.Context, out_dir: Optional[Path], limit: Optional[int]) -> None:
    """Show the ranked candidates from the last sweep.

    \b
    Examples:
      sweepgen top
      sweepgen top --out-dir runs/xauusd -n 3
    """
    store = CandidateStore(resolve_out_dir(ctx, out_dir))

    if not store.top_candidates_path.exists():
        fail(
            f"No ranked candidates in {store.out_dir}.",
            hint="Run [cyan]sweepgen generate --sweep[/cyan] first.",
        )

    try:
        ranked = store.read_top()
    except (OSError, ValueError) as e:
        fail(str(e))

    if limit is not None:
        ranked = ranked[:limit]

    table = Table(title=f"Top candidates ({store.top_candidates_path})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Model ID", style="cyan")
    table.add_column("Donch", justify="right")
    table.add_column("RR", justify="right")
    table.add_column("Spread", justify="right")
    table.add_column("Session")
    table.add_column("PF", justify="right")
    table.add_column("DD", justify="right")
    table.add_column("Score", justify="right", style="bold green")

    for rank, candidate in enumerate(ranked, start=1):
        params = candidate.params
        metrics = candidate.metrics
        table.add_row(
            str(rank),
            candidate.id,
            str(params.donch_n),
            f"{params.rr_min:.2f}",
            f"{params.max_spread:.2f}",
            params.session_filter,
            f"{metrics.profit_factor:.3f}",
            f"{metrics.max_drawdown:.3f}",
            f"{candidate.score:.3f}",
        )

    console.print(table)
