"""Command-line interface for running and administering the Book API."""

import json
from pathlib import Path

import typer
from rich.console import Console

from src.book_api.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="book-api",
    help="Book API - serve the API and manage its database",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port (defaults to app.port / PORT)"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    from src.book_api.api.http.app import app as api_app

    config = get_config()
    bind_host = host if host is not None else config.app.host
    bind_port = port if port is not None else config.app.port

    console.print(
        f"[green]Book API running on {bind_host}:{bind_port}[/green] "
        f"(docs at {config.docs.url})"
    )
    uvicorn.run(
        api_app,
        host=bind_host,
        port=bind_port,
        access_log=False,  # We handle access logging in middleware
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    from src.book_api.runtime.init_db import init_db as run_init_db

    run_init_db()
    console.print("[green]✅ Database tables created[/green]")


@app.command()
def openapi(
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the document to this file"
    ),
) -> None:
    """Print the OpenAPI document describing the HTTP surface."""
    from src.book_api.api.http.app import app as api_app

    document = json.dumps(api_app.openapi(), indent=2)
    if output is None:
        typer.echo(document)
        return

    output.write_text(document + "\n", encoding="utf-8")
    console.print(f"[green]OpenAPI document written to {output}[/green]")


if __name__ == "__main__":
    app()
