"""
Issueboard CLI - Show command.

Fetch the reports once and print the board in the terminal.
"""

import asyncio

import typer
from rich.console import Console

from issueboard.core.board.labels import get_labels
from issueboard.core.board.state import BoardState
from issueboard.core.config.loader import load_config
from issueboard.core.reports.client import ReportClient
from issueboard.core.reports.exceptions import ConfigError
from issueboard.dashboard.renderer import BoardRenderer

app = typer.Typer(
    name="show",
    help="Print the issue board in the terminal",
    no_args_is_help=False,
)

console = Console()


async def _refresh_once(state: BoardState, client: ReportClient) -> None:
    """Run the mount refresh, then release the client's HTTP session."""
    try:
        await state.refresh()
    finally:
        await client.aclose()


@app.callback(invoke_without_command=True)
def show(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the board snapshot as JSON instead of cards",
    ),
) -> None:
    """
    Show the issue board.

    Fetches every report once, then prints the stats and report cards.
    A failed fetch is logged (see --debug) and an empty board is shown.

    Examples:
        issueboard show                # Cards in the terminal
        issueboard show --json         # Machine-readable snapshot
        issueboard --debug show        # Include fetch logging
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_config()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[dim]Set SUPABASE_URL and SUPABASE_ANON_KEY (or add them to .env).[/dim]")
        raise typer.Exit(1)

    client = ReportClient(config.remote)
    state = BoardState(client)
    asyncio.run(_refresh_once(state, client))
    snapshot = state.snapshot()

    if json_output:
        typer.echo(snapshot.model_dump_json(indent=2))
        return

    BoardRenderer(console=console, labels=get_labels(config.locale)).print(snapshot)
