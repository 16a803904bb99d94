"""Data models for the conversation.

Hides the representation of messages, the transcript and the wire schemas.
"""

from collections.abc import Iterator
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Origin of a message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(BaseModel):
    """A single message in the transcript. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="Client-side creation time, for display only",
    )

    def to_wire(self) -> "WireMessage":
        """Project onto the role/content pair sent to the server."""
        return WireMessage(role=self.role, content=self.content)


class WireMessage(BaseModel):
    """Message as it appears in the request payload."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request body: the full transcript at the time of sending."""

    model_config = ConfigDict(frozen=True)

    messages: list[WireMessage] = Field(default_factory=list)


class ChatReply(BaseModel):
    """Success response body."""

    model_config = ConfigDict(strict=True)

    response: str


class ChatError(BaseModel):
    """Structured error response body."""

    model_config = ConfigDict(strict=True)

    error: str
    details: str | None = None

    def describe(self) -> str:
        if self.details is not None:
            return f"Error: {self.error} - {self.details}"
        return f"Error: {self.error}"


class Transcript:
    """Ordered, append-only history of one chat session.

    Prior messages are never removed or reordered. A new session starts
    with a new Transcript.
    """

    def __init__(self, messages: list[Message] | None = None) -> None:
        self._messages: list[Message] = list(messages or [])

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    def snapshot(self) -> tuple[Message, ...]:
        """Immutable view of the transcript at this point in time."""
        return tuple(self._messages)

    def last(self, role: Role | None = None) -> Message | None:
        """Most recent message, optionally restricted to a role."""
        for message in reversed(self._messages):
            if role is None or message.role == role:
                return message
        return None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    def __repr__(self) -> str:
        return f"Transcript({len(self._messages)} messages)"
