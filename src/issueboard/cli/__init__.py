"""
Issueboard CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from issueboard import __version__
from issueboard.cli import dashboard, show
from issueboard.core.config.env import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="issueboard",
    help="Issue tracker dashboard for hosted bug and feature reports",
    no_args_is_help=False,
    invoke_without_command=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Issueboard - bug and feature reports at a glance.

    Reads every report from the configured Supabase table and shows the
    totals plus one card per report, newest first.

    Configuration (environment or .env):
        SUPABASE_URL           Project URL
        SUPABASE_ANON_KEY      Public anon key
        ISSUEBOARD_TABLE       Table name (default: bug_reports)
        ISSUEBOARD_LOCALE      zh-TW or en (default: zh-TW)

    Examples:
        issueboard dashboard           # Web dashboard on port 8080
        issueboard show                # Board in the terminal
        issueboard show --json         # Snapshot as JSON
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    # Store debug flag in context for subcommands
    ctx.obj = {"debug": debug}

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


app.add_typer(dashboard.app, name="dashboard")
app.add_typer(show.app, name="show")


@app.command()
def version() -> None:
    """Show issueboard version and exit."""
    console.print(f"issueboard version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
