"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Dark theme built on the Catppuccin Mocha palette
TOURAI_NIGHT = Theme(
    name="tourai-night",
    primary="#89b4fa",      # Blue - user bubbles, focus
    secondary="#94e2d5",    # Teal - assistant bubbles
    accent="#f9e2af",       # Yellow - highlights
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",      # Green - send button
    warning="#fab387",      # Peach - system notices, log panel
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "block-cursor-foreground": "#11111b",
        "block-cursor-background": "#f5e0dc",
        "input-cursor-background": "#cdd6f4",
        "input-selection-background": "#89b4fa 30%",
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-key-foreground": "#f9e2af",
        "footer-background": "#11111b",
        "text-muted": "#6c7086",
    },
)
