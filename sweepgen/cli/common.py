"""Helpers shared by SweepGen CLI commands."""

from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from sweepgen.config import load_config
from sweepgen.errors import ConfigError

# stdout is reserved for JSON results; everything human-facing goes to stderr
console = Console(stderr=True)


def fail(message: str, title: str = "Error", hint: str = "") -> NoReturn:
    """Print an error panel and exit with status 1.

    Args:
        message: Plain error text, shown verbatim.
        title: Panel title.
        hint: Optional follow-up line; may contain rich markup.
    """
    body = f"[red]{escape(message)}[/red]"
    if hint:
        body += f"\n\n{hint}"
    console.print(Panel(
        body,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def get_config(ctx: click.Context) -> dict[str, dict[str, Any]]:
    """Load configuration once per invocation and cache it on the context."""
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        try:
            obj["config"] = load_config(obj.get("config_path"))
        except ConfigError as e:
            fail(str(e), title="Configuration Error")
    return obj["config"]


def resolve_out_dir(ctx: click.Context, out_dir: Path | None) -> Path:
    """Output directory from the command line, else from configuration."""
    if out_dir is not None:
        return out_dir
    return Path(get_config(ctx)["output"]["dir"])
