"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a single column with the conversation on top, the optional log
panel below it and the input bar docked at the bottom.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#welcome-banner {
    width: 100%;
    height: auto;
    content-align: center middle;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 1 0;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
}

/* User messages sit on the right */
.user-message {
    margin: 0 0 1 16;
    border-right: tall $primary;
    background: $primary 15%;

    & .message-header {
        color: $primary;
        text-align: right;
    }

    & .message-content {
        text-align: right;
    }
}

/* Assistant messages sit on the left */
.assistant-message {
    margin: 0 16 1 0;
    border-left: tall $secondary;
    background: $secondary 10%;

    & .message-header {
        color: $secondary;
    }
}

/* Client-generated notices (errors, network failures) */
.system-message {
    margin: 0 16 1 0;
    border-left: tall $warning;
    background: $warning 10%;

    & .message-header {
        color: $warning;
    }

    & .message-content {
        color: $warning-lighten-1;
    }
}

.message-header {
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:disabled {
        border: tall $border;
        background: $surface;
        color: $text-muted;
    }
}

#busy-indicator {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    color: $primary;
    display: none;
}

ChatInputBar.-busy {
    #send-btn {
        display: none;
    }

    #busy-indicator {
        display: block;
    }
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}

Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-error {
        border: tall $error;
    }

    &.-warning {
        border: tall $warning;
    }
}
"""
