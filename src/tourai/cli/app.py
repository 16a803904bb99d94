"""Main CLI application using Typer."""
import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..conversation import Message, Role
from .settings import get_client, require_settings

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="tourai",
    help="Chat with the TourAI trip-planning assistant",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

_ROLE_LABELS = {
    Role.USER: "[bold yellow]You:[/bold yellow]",
    Role.ASSISTANT: "[bold green]TourAI:[/bold green]",
    Role.SYSTEM: "[bold red]Notice:[/bold red]",
}

EndpointOption = typer.Option(
    None,
    "--endpoint",
    "-e",
    help="Assistant endpoint URL (default: $TOURAI_ENDPOINT or the production endpoint)"
)
TimeoutOption = typer.Option(
    None,
    "--timeout",
    "-t",
    help="Request timeout in seconds (default: $TOURAI_TIMEOUT or 30)"
)
LogLevelOption = typer.Option(
    None,
    "--log-level",
    "-l",
    help="Log level: debug (all), info, warning, or error"
)


def _configure_logging(level: str | None) -> None:
    if level is None:
        return
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, markup=False)],
    )


def _print_message(message: Message) -> None:
    console.print(_ROLE_LABELS[message.role], end=" ")
    console.print(message.content, markup=False, highlight=False)


@app.command()
def ask(
    text: str = typer.Argument(..., help="Message to send"),
    endpoint: str | None = EndpointOption,
    timeout: float | None = TimeoutOption,
    log_level: str | None = LogLevelOption,
):
    """Send a single message and print the reply."""
    settings = require_settings(endpoint, timeout, log_level, console=console)
    _configure_logging(settings.log_level)

    if not text.strip():
        console.print("[red]Error: message is empty[/red]")
        raise typer.Exit(code=1)

    async def _ask() -> Message | None:
        async with get_client(settings) as client:
            return await client.send_message(text)

    outcome = asyncio.run(_ask())
    if outcome is None:
        raise typer.Exit(code=1)

    _print_message(outcome)
    if outcome.role == Role.SYSTEM:
        raise typer.Exit(code=1)


@app.command()
def chat(
    endpoint: str | None = EndpointOption,
    timeout: float | None = TimeoutOption,
    log_level: str | None = LogLevelOption,
):
    """Interactive chat in the terminal, without the full-screen UI."""
    settings = require_settings(endpoint, timeout, log_level, console=console)
    _configure_logging(settings.log_level)

    async def _chat():
        async with get_client(settings) as client:
            console.print("[bold cyan]Plan your trip with TourAI ![/bold cyan]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[dim]Waiting for TourAI...[/dim]"):
                    outcome = await client.send_message(user_input)
                if outcome is not None:
                    _print_message(outcome)
                    console.print()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    endpoint: str | None = EndpointOption,
    timeout: float | None = TimeoutOption,
    log_level: str | None = LogLevelOption,
):
    """Launch the full-screen chat interface."""
    settings = require_settings(endpoint, timeout, log_level, console=console)

    async def _tui():
        from ..ui import run_textual_tui

        client = get_client(settings)
        try:
            await run_textual_tui(client, log_level=settings.log_level)
        finally:
            await client.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def version():
    """Show the installed version."""
    console.print(f"tourai {__version__}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
