"""Configuration commands for SweepGen CLI."""

import click
import toml

from sweepgen.cli.common import console, get_config
from sweepgen.config import create_template_config, get_config_path


@click.group()
def config() -> None:
    """Manage the SweepGen configuration file.

    \b
    Commands:
      init  - Write a template config file
      show  - Print the effective configuration
    """
    pass


@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a template config file with the default settings."""
    path = ctx.find_object(dict).get("config_path") or get_config_path()

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")
        return

    path = create_template_config(path)
    console.print(f"[green]✓[/green] Wrote config template to [cyan]{path}[/cyan]")


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the effective configuration as TOML."""
    click.echo(toml.dumps(get_config(ctx)), nl=False)
