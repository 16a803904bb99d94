from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class HttpTransport(ABC):
    """Abstract base class for the HTTP primitive used by the conversation client.

    This module hides the design decision of which HTTP library performs the
    exchange. Implementations must handle:
    - Connection setup and teardown
    - Applying the per-request timeout
    - Translating library-specific failures into TransportError

    HTTP status codes are not treated as failures: the remote endpoint reports
    its errors inside the body, so the body is returned whatever the status.

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            body = await transport.request(url, "POST", headers, payload, 30.0)
    """

    @abstractmethod
    async def request(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None,
        timeout: float,
    ) -> bytes:
        """Perform a single HTTP request.

        Args:
            url: Absolute URL to call
            method: HTTP method (e.g. "POST")
            headers: Request headers
            body: Raw request body, or None for no body
            timeout: Timeout in seconds for the whole exchange

        Returns:
            The raw response body (possibly empty)

        Raises:
            TransportError: If no response body could be obtained
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "HttpTransport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
