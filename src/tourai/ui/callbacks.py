"""Callback interface between the conversation client and the TUI.

Hides the details of how the TUI receives updates from the client and
from the logging module. Uses thread-safe calls so updates always land on
the thread that owns the widgets.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any

from ..conversation import ClientEvent, EventKind, Role
from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


def _call_thread_safe(app: "App | None", func: Any, *args: Any, **kwargs: Any) -> None:
    """Call a function on the app thread."""
    if app is not None and app._thread_id != threading.get_ident():
        app.call_from_thread(func, *args, **kwargs)
    else:
        func(*args, **kwargs)


class TUICallback:
    """Routes client events to the chat widgets.

    Subscribed to ConversationClient; the transcript and busy flag are the
    only inputs to rendering.
    """

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        input_bar: "ChatInputBar",
        app: "App | None" = None,
    ) -> None:
        self.chat = chat
        self.input_bar = input_bar
        self.app = app

    def __call__(self, event: ClientEvent) -> None:
        _call_thread_safe(self.app, self._apply, event)

    def _apply(self, event: ClientEvent) -> None:
        if event.kind == EventKind.MESSAGE_APPENDED and event.message is not None:
            self.chat.add_message(event.message)
            if event.message.role == Role.USER:
                self.input_bar.clear_input()
        elif event.kind == EventKind.BUSY_CHANGED:
            self.input_bar.set_busy(event.busy)
            if not event.busy:
                self.input_bar.focus_input()
        elif event.kind == EventKind.RESET:
            self.chat.clear_history()


def make_debug_callback(panel: "DebugPanel", app: "App | None" = None) -> Any:
    """Build a (level, component, message) callback writing to the log panel."""

    def debug_callback(level: str, component: str, message: str) -> None:
        _call_thread_safe(app, panel.log_entry, component, message, LogLevel.from_string(level))

    return debug_callback


class DebugPanelHandler(logging.Handler):
    """logging.Handler that mirrors records into the log panel.

    The component shown is the last segment of the logger name.
    """

    def __init__(self, panel: "DebugPanel", app: "App | None" = None, level: int = logging.DEBUG) -> None:
        super().__init__(level=level)
        self.panel = panel
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            component = record.name.rsplit(".", 1)[-1]
            _call_thread_safe(self.app, self.panel.log_entry, component, message, min(record.levelno, LogLevel.ERROR))
        except Exception:
            self.handleError(record)
