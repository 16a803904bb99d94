from ..errors import TransportError
from .base import HttpTransport
from .factory import create_transport
from .httpx_transport import HttpxTransport

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "TransportError",
    "create_transport",
]
