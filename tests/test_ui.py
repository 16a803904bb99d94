"""Smoke tests for the Textual UI, driven through Pilot."""
import asyncio

import pytest
from textual.widgets import Button, TextArea

from tourai.conversation import Role
from tourai.ui import ChatHistoryWidget, ChatInputBar, DebugPanel, TourAIApp


@pytest.mark.asyncio
async def test_send_button_tracks_input(client):
    """Test that Send is disabled until there is non-blank input."""
    app = TourAIApp(client)
    async with app.run_test() as pilot:
        send = app.query_one("#send-btn", Button)
        text_area = app.query_one("#chat-input", TextArea)
        assert send.disabled

        text_area.insert("   ")
        await pilot.pause()
        assert send.disabled

        text_area.insert("Rome")
        await pilot.pause()
        assert not send.disabled
        assert client.pending_input == "   Rome"


@pytest.mark.asyncio
async def test_exchange_renders_transcript(client, fake_transport):
    """Test that a send renders the user message and the reply."""
    fake_transport.outcomes.append(b'{"response":"Paris is lovely in spring."}')
    app = TourAIApp(client)
    async with app.run_test() as pilot:
        app.query_one("#chat-input", TextArea).insert("Where in April?")
        await pilot.pause()

        await pilot.click("#send-btn")
        await app.workers.wait_for_complete()
        await pilot.pause()

        chat = app.query_one("#chat-history", ChatHistoryWidget)
        assert chat.message_count == 2
        assert [m.role for m in client.transcript] == [Role.USER, Role.ASSISTANT]
        assert app.query_one("#chat-input", TextArea).text == ""
        assert not app.query_one("#chat-input-bar", ChatInputBar).busy


@pytest.mark.asyncio
async def test_busy_state_disables_send(client, fake_transport):
    """Test that the input bar shows the busy state while a request is pending."""
    fake_transport.gate = asyncio.Event()
    fake_transport.outcomes.append(b"not json")
    app = TourAIApp(client)
    async with app.run_test() as pilot:
        input_bar = app.query_one("#chat-input-bar", ChatInputBar)
        app.query_one("#chat-input", TextArea).insert("Hello")
        await pilot.pause()

        await pilot.click("#send-btn")
        await pilot.pause()
        assert client.busy
        assert input_bar.busy
        assert input_bar.has_class("-busy")
        assert app.query_one("#send-btn", Button).disabled

        fake_transport.gate.set()
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert not input_bar.busy
        assert client.transcript[-1].role == Role.SYSTEM
        assert "not json" in client.transcript[-1].content


@pytest.mark.asyncio
async def test_toggle_log_panel(client):
    """Test that F2 shows and hides the log panel."""
    app = TourAIApp(client)
    async with app.run_test() as pilot:
        panel = app.query_one("#debug-panel", DebugPanel)
        assert not panel.display

        await pilot.press("f2")
        assert panel.display

        await pilot.press("f2")
        assert not panel.display


@pytest.mark.asyncio
async def test_log_level_shows_panel(client):
    """Test that a log level given at start opens the panel at that level."""
    app = TourAIApp(client, log_level="warning")
    async with app.run_test():
        panel = app.query_one("#debug-panel", DebugPanel)
        assert panel.display
        assert panel.border_subtitle == "Level: WARNING"
