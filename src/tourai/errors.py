"""Exception hierarchy for tourai."""


class TourAIError(Exception):
    """Base class for all tourai errors."""


class TransportError(TourAIError):
    """The HTTP exchange failed before a response body was received.

    Covers timeouts, refused connections and name resolution failures.
    The message is a human readable description suitable for display.
    """
