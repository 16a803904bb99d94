"""Client factory functions for CLI.

Centralizes creation of the transport and conversation client from
environment variables. Hides configuration details from command
implementations.
"""

import os

import typer
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

from ..conversation import DEFAULT_TIMEOUT, ConversationClient
from ..transport import create_transport
from ..ui.config import LogLevel

DEFAULT_ENDPOINT = "https://5haapyl219.execute-api.eu-central-1.amazonaws.com/prod/ask"

# Default console for output
_console = Console()


class ClientSettings(BaseModel):
    """Resolved client configuration."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Assistant endpoint URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    log_level: str | None = Field(default=None, description="debug, info, warning or error")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not LogLevel.is_valid(value):
            raise ValueError(f"Unknown log level: {value}")
        return value.lower()


def load_settings(
    endpoint: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
) -> ClientSettings:
    """Build settings from explicit values, falling back to the environment.

    Environment variables:
        TOURAI_ENDPOINT: Assistant endpoint URL (default: production endpoint)
        TOURAI_TIMEOUT: Request timeout in seconds (default: 30)
        TOURAI_LOG_LEVEL: Log level (debug, info, warning, error; default: unset)

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    return ClientSettings(
        endpoint=endpoint or os.getenv("TOURAI_ENDPOINT", DEFAULT_ENDPOINT),
        timeout=timeout if timeout is not None else os.getenv("TOURAI_TIMEOUT", DEFAULT_TIMEOUT),
        log_level=log_level or os.getenv("TOURAI_LOG_LEVEL") or None,
    )


def require_settings(
    endpoint: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
    console: Console | None = None,
) -> ClientSettings:
    """Load settings, exiting with an error message if they are invalid.

    Raises:
        SystemExit: If configuration is invalid
    """
    con = console or _console
    try:
        return load_settings(endpoint=endpoint, timeout=timeout, log_level=log_level)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            con.print(f"[red]Error: invalid {field}: {error['msg']}[/red]")
        raise typer.Exit(code=1)


def get_client(settings: ClientSettings) -> ConversationClient:
    """Create a conversation client for the configured endpoint."""
    return ConversationClient(
        create_transport("httpx"),
        endpoint=settings.endpoint,
        timeout=settings.timeout,
    )
