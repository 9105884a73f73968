"""
Issueboard CLI - Dashboard command.

Launch the issue board web interface.
"""

import threading
import time
import webbrowser

import typer
import uvicorn
from rich.console import Console

from issueboard.core.board.labels import get_labels
from issueboard.core.config.loader import load_config
from issueboard.core.dashboard.api.app import create_app
from issueboard.core.reports.exceptions import ConfigError

app = typer.Typer(
    name="dashboard",
    help="Launch the issue board web dashboard",
    no_args_is_help=False,
)

console = Console()


@app.callback(invoke_without_command=True)
def dashboard(
    ctx: typer.Context,
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Interface to bind the server to",
    ),
    port: int = typer.Option(
        8080,
        "--port",
        "-p",
        help="Port to run the server on",
    ),
    no_browser: bool = typer.Option(
        False,
        "--no-browser",
        help="Don't open browser automatically",
    ),
) -> None:
    """
    Launch the issue board dashboard.

    This command:
    1. Reads the Supabase URL and anon key from the environment
    2. Starts the FastAPI server (the first fetch runs at startup)
    3. Opens the dashboard in your default browser

    Examples:
        issueboard dashboard                  # Launch on default port 8080
        issueboard dashboard --port 3000      # Launch on port 3000
        issueboard dashboard --no-browser     # Don't open browser
    """
    if ctx.invoked_subcommand is not None:
        return

    debug = ctx.obj.get("debug", False) if ctx.obj else False

    try:
        config = load_config()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[dim]Set SUPABASE_URL and SUPABASE_ANON_KEY (or add them to .env).[/dim]")
        raise typer.Exit(1)

    if debug:
        console.print(f"[dim]Remote: {config.remote.url}[/dim]")
        console.print(f"[dim]Table: {config.remote.table}[/dim]")

    fastapi_app = create_app(labels=get_labels(config.locale))

    url = f"http://{'localhost' if host in ('127.0.0.1', '0.0.0.0') else host}:{port}"
    console.print("\n[bold cyan]Starting dashboard server...[/bold cyan]")
    console.print(f"[dim]Board: {url}/[/dim]")
    console.print(f"[dim]API: {url}/api/board[/dim]")

    # Open browser after a short delay
    if not no_browser:

        def open_browser() -> None:
            time.sleep(1.5)  # Wait for server to start
            console.print(f"\n[green]Opening browser:[/green] {url}")
            webbrowser.open(url)

        threading.Thread(target=open_browser, daemon=True).start()

    console.print("\n[dim]Press Ctrl+C to stop[/dim]\n")

    try:
        uvicorn.run(
            fastapi_app,
            host=host,
            port=port,
            log_level="info" if debug else "warning",
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Dashboard stopped[/yellow]")
        raise typer.Exit(0)
