"""
TourAI: a terminal chat front-end for the TourAI trip-planning assistant.

The conversation client forwards the transcript to a remote HTTP endpoint
and records the reply. The Textual UI and Typer CLI sit on top of it.
"""

__version__ = "0.1.0"

from .conversation import ConversationClient, Message, Role, Transcript
from .errors import TourAIError, TransportError
from .transport import HttpTransport, create_transport

__all__ = [
    "ConversationClient",
    "HttpTransport",
    "Message",
    "Role",
    "TourAIError",
    "Transcript",
    "TransportError",
    "create_transport",
]
