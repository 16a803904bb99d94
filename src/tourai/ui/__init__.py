"""Terminal UI module for tourai.

Provides a Textual-based TUI for chatting with the assistant endpoint.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (input bar, transcript view, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- callbacks.py: Client integration (how the TUI receives updates)
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import TourAIApp, run_textual_tui
from .callbacks import DebugPanelHandler, TUICallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "DebugPanelHandler",
    "LogLevel",
    "TUICallback",
    "TourAIApp",
    "run_textual_tui",
]
