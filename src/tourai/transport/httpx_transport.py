import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..errors import TransportError
from .base import HttpTransport

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """HTTP transport implementation using httpx.

    Hidden design decisions:
    - Async client lifecycle (owned or injected)
    - Mapping of httpx request failures (timeouts, connection, decoding,
      redirects) to TransportError descriptions
    - Timeout applied per request rather than per client
    """

    def __init__(self, client: httpx.AsyncClient | None = None, **client_kwargs: Any):
        """Initialize the transport.

        Args:
            client: Pre-built AsyncClient to use (e.g. one wrapping
                httpx.MockTransport). The transport does not close an
                injected client.
            **client_kwargs: Additional kwargs for a newly created AsyncClient
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(**client_kwargs)

    async def request(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None,
        timeout: float,
    ) -> bytes:
        """Send the request and return the raw body, whatever the status code."""
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers),
                content=body,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out after %ss", url, timeout)
            raise TransportError(f"The request timed out after {timeout:g} seconds.") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            description = str(e) or type(e).__name__
            logger.warning("Request to %s failed: %s", url, description)
            raise TransportError(description) from e

        logger.debug("Status code: %s", response.status_code)
        logger.debug("Response headers: %s", dict(response.headers))
        return response.content

    async def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
