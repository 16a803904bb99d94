"""Main Textual TUI application.

Orchestrates the UI components and forwards user input to the
ConversationClient. All rendering is driven by client events.
"""

import asyncio
import contextlib
import logging

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, TextArea

from ..conversation import ConversationClient, Role
from .callbacks import DebugPanelHandler, TUICallback, make_debug_callback
from .config import APP_SUBTITLE, APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import TOURAI_NIGHT
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class TourAIApp(App):
    """Textual TUI for chatting with the TourAI assistant."""

    CSS = APP_CSS
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("f2", "toggle_debug", "Log"),
        Binding("f3", "copy_last_response", "Copy Response"),
        Binding("f5", "clear_chat", "New Chat"),
    ]

    def __init__(self, client: ConversationClient, log_level: str | None = None) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self._bridge: TUICallback | None = None
        self._log_handler: logging.Handler | None = None

    @property
    def client(self) -> ConversationClient:
        return self._client

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(TOURAI_NIGHT)
        self.theme = "tourai-night"

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        log_panel = self.query_one("#debug-panel", DebugPanel)

        # Replay anything already in the transcript
        for message in self._client.transcript:
            chat.add_message(message)
        input_bar.set_busy(self._client.busy)

        self._bridge = TUICallback(chat, input_bar, app=self)
        self._client.subscribe(self._bridge)
        self._client.set_debug_callback(make_debug_callback(log_panel, app=self))

        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            self._log_handler = DebugPanelHandler(log_panel, app=self, level=log_panel.log_level)
            package_logger = logging.getLogger("tourai")
            package_logger.setLevel(log_panel.log_level)
            package_logger.addHandler(self._log_handler)
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self.sub_title = f"{APP_SUBTITLE} | {self._client.endpoint}"
        input_bar.focus_input()

    def on_unmount(self) -> None:
        """Detach from the client and logging."""
        if self._bridge is not None:
            self._client.unsubscribe(self._bridge)
            self._bridge = None
        self._client.set_debug_callback(None)
        if self._log_handler is not None:
            logging.getLogger("tourai").removeHandler(self._log_handler)
            self._log_handler = None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the client's input buffer in sync with the text area."""
        self._client.pending_input = event.text_area.text

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if not self._client.can_send(event.value):
            return
        self._send(event.value)

    # Not exclusive: an exclusive worker would cancel the request in flight.
    # The client's busy flag refuses overlapping sends.
    @work(group="send")
    async def _send(self, text: str) -> None:
        """Run the exchange as a background async worker."""
        outcome = await self._client.send_message(text)
        if outcome is not None and outcome.role == Role.SYSTEM:
            self.notify(outcome.content[:80], severity="warning", timeout=4)

    def action_clear_chat(self) -> None:
        """Start a new conversation."""
        if self._client.reset():
            self.notify("Chat cleared", timeout=2)
        else:
            self.notify("Wait for the reply before clearing", severity="warning", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        last = self._client.transcript.last(Role.ASSISTANT)
        if last is None:
            self.notify("No response to copy", severity="warning")
            return
        self.copy_to_clipboard(last.content)
        self.notify("Response copied")

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(client: ConversationClient, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        client: Conversation client bound to the assistant endpoint
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = TourAIApp(client=client, log_level=log_level)
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
