"""Conversation module for tourai.

Holds the transcript, the wire codec and the client that talks to the
assistant endpoint.
"""

from .client import DEFAULT_TIMEOUT, ClientEvent, ConversationClient, EventKind
from .codec import decode_response, encode_request
from .models import ChatError, ChatReply, ChatRequest, Message, Role, Transcript

__all__ = [
    "DEFAULT_TIMEOUT",
    "ChatError",
    "ChatReply",
    "ChatRequest",
    "ClientEvent",
    "ConversationClient",
    "EventKind",
    "Message",
    "Role",
    "Transcript",
    "decode_response",
    "encode_request",
]
