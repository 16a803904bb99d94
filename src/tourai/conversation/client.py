"""Conversation client.

Owns the transcript and the busy flag, and performs the exchange with the
assistant endpoint. This module hides:
- How the transcript is serialized and sent
- How response bodies and transport failures become transcript messages
- How a second send is refused while one is in flight
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from ..errors import TransportError
from ..transport import HttpTransport
from .codec import (
    INVALID_URL_MESSAGE,
    decode_response,
    describe_transport_error,
    encode_failure,
    encode_request,
    system_message,
)
from .models import Message, Role, Transcript

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
REQUEST_HEADERS = {"Content-Type": "application/json"}


class EventKind(str, Enum):
    MESSAGE_APPENDED = "message_appended"
    BUSY_CHANGED = "busy_changed"
    RESET = "reset"


@dataclass(frozen=True)
class ClientEvent:
    """Notification sent to subscribers when client state changes."""

    kind: EventKind
    message: Message | None = None
    busy: bool = False


Listener = Callable[[ClientEvent], None]


class ConversationClient:
    """Client holding a transcript and exchanging it with a fixed endpoint.

    At most one request is in flight at a time. The busy flag is checked and
    set before the first await in send_message, so on a single event loop a
    concurrent second call always observes it.

    Example:
        async with create_transport("httpx") as transport:
            client = ConversationClient(transport, endpoint=url)
            reply = await client.send_message("Where should I go in May?")
    """

    def __init__(
        self,
        transport: HttpTransport,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._transport = transport
        self._endpoint = endpoint
        self._timeout = timeout
        self._transcript = Transcript()
        self._busy = False
        self._listeners: list[Listener] = []
        self._debug_callback: Any | None = None
        self.pending_input = ""

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def busy(self) -> bool:
        """True while a request is outstanding."""
        return self._busy

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout(self) -> float:
        return self._timeout

    def subscribe(self, listener: Listener) -> None:
        """Register a callable notified of every state change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed exchange logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback

    def can_send(self, text: str | None = None) -> bool:
        """Whether send_message would accept this input right now."""
        candidate = self.pending_input if text is None else text
        return bool(candidate.strip()) and not self._busy

    def reset(self) -> bool:
        """Start a new, empty transcript. Refused while a request is in flight."""
        if self._busy:
            self._debug("warning", "Client", "Reset refused: request in flight")
            return False
        self._transcript = Transcript()
        self._notify(ClientEvent(EventKind.RESET))
        return True

    async def send_message(self, text: str | None = None) -> Message | None:
        """Send text to the endpoint and record the outcome.

        An endpoint that is not an http(s) URL appends only the "Invalid URL"
        notice; no user message is recorded in that case.

        Args:
            text: Message to send; defaults to pending_input

        Returns:
            The outcome message appended to the transcript, or None when the
            input was empty or a request is already in flight.
        """
        raw = self.pending_input if text is None else text
        content = raw.strip()
        if not content:
            return None
        if self._busy:
            logger.warning("send_message ignored: a request is already in flight")
            self._debug("warning", "Client", "Send ignored while busy")
            return None

        if not _is_valid_endpoint(self._endpoint):
            logger.warning("Invalid endpoint URL: %r", self._endpoint)
            return self._append(system_message(INVALID_URL_MESSAGE))

        self._set_busy(True)
        try:
            self._append(Message(role=Role.USER, content=content))
            self.pending_input = ""
            return await self._exchange()
        finally:
            self._set_busy(False)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    async def __aenter__(self) -> "ConversationClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._transport.__aexit__(exc_type, exc_val, exc_tb)

    async def _exchange(self) -> Message:
        try:
            payload = encode_request(self._transcript)
        except (TypeError, ValueError) as e:
            logger.warning("Failed to encode payload: %s", e)
            return self._append(encode_failure(e))

        logger.debug("Request payload: %s", payload.decode("utf-8"))
        self._debug("debug", "HTTP", f"POST {self._endpoint} ({len(payload)} bytes)")

        try:
            body = await self._transport.request(
                self._endpoint,
                "POST",
                REQUEST_HEADERS,
                payload,
                self._timeout,
            )
        except TransportError as e:
            self._debug("error", "HTTP", f"Network error: {e}")
            return self._append(describe_transport_error(e))

        logger.debug("Raw response data: %s", body.decode("utf-8", errors="replace"))
        outcome = decode_response(body)
        level = "info" if outcome.role == Role.ASSISTANT else "warning"
        self._debug(level, "HTTP", f"Received {len(body)} bytes -> {outcome.role.value}")
        return self._append(outcome)

    def _append(self, message: Message) -> Message:
        self._transcript.append(message)
        self._notify(ClientEvent(EventKind.MESSAGE_APPENDED, message=message, busy=self._busy))
        return message

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self._notify(ClientEvent(EventKind.BUSY_CHANGED, busy=busy))

    def _notify(self, event: ClientEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)


def _is_valid_endpoint(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)
