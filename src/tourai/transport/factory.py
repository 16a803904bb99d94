from typing import Any

from .base import HttpTransport
from .httpx_transport import HttpxTransport


def create_transport(kind: str = "httpx", **config: Any) -> HttpTransport:
    """Create an HTTP transport instance.

    This factory function hides the instantiation logic for different transports.

    Args:
        kind: Transport type (only 'httpx' is supported)
        **config: Transport-specific configuration
            For httpx:
                - client: httpx.AsyncClient | None
                - any other httpx.AsyncClient keyword argument

    Returns:
        Initialized transport instance

    Raises:
        ValueError: If transport type is not supported

    Examples:
        >>> transport = create_transport("httpx", follow_redirects=True)
    """
    if kind.lower() == "httpx":
        return HttpxTransport(**config)

    raise ValueError(
        f"Unsupported transport: {kind}. "
        f"Supported transports: 'httpx'"
    )
