"""Tests for settings and the Typer CLI."""
import httpx
import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from tourai import __version__
from tourai.cli import settings as settings_module
from tourai.cli.app import app
from tourai.cli.settings import DEFAULT_ENDPOINT, ClientSettings, load_settings
from tourai.transport import HttpxTransport

runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove tourai variables from the environment."""
    for name in ("TOURAI_ENDPOINT", "TOURAI_TIMEOUT", "TOURAI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def serve(monkeypatch, clean_env):
    """Route CLI traffic to an httpx.MockTransport handler."""

    def _serve(handler):
        def _create_transport(kind="httpx", **config):
            return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

        monkeypatch.setattr(settings_module, "create_transport", _create_transport)

    return _serve


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, clean_env):
        """Test defaults when nothing is configured."""
        settings = load_settings()
        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.timeout == 30.0
        assert settings.log_level is None

    def test_environment(self, monkeypatch, clean_env):
        """Test that environment variables are honoured."""
        monkeypatch.setenv("TOURAI_ENDPOINT", "http://localhost:8000/ask")
        monkeypatch.setenv("TOURAI_TIMEOUT", "12.5")
        monkeypatch.setenv("TOURAI_LOG_LEVEL", "INFO")

        settings = load_settings()

        assert settings.endpoint == "http://localhost:8000/ask"
        assert settings.timeout == 12.5
        assert settings.log_level == "info"

    def test_explicit_values_override_environment(self, monkeypatch, clean_env):
        """Test that explicit arguments win over the environment."""
        monkeypatch.setenv("TOURAI_TIMEOUT", "12.5")
        assert load_settings(timeout=5).timeout == 5.0

    def test_non_positive_timeout_rejected(self):
        """Test that a zero timeout fails validation."""
        with pytest.raises(ValidationError):
            ClientSettings(timeout=0)

    def test_unknown_log_level_rejected(self):
        """Test that an unknown log level fails validation."""
        with pytest.raises(ValidationError):
            ClientSettings(log_level="verbose")


class TestAskCommand:
    """Tests for the one-shot ask command."""

    def test_success(self, serve):
        """Test that a reply is printed and the exit code is zero."""
        serve(lambda request: httpx.Response(200, json={"response": "Paris is lovely in spring."}))

        result = runner.invoke(app, ["ask", "Where in April?"])

        assert result.exit_code == 0
        assert "Paris is lovely in spring." in result.output

    def test_server_error_exits_nonzero(self, serve):
        """Test that a structured error gives exit code 1."""
        serve(lambda request: httpx.Response(500, json={"error": "rate_limited", "details": "try later"}))

        result = runner.invoke(app, ["ask", "Hello"])

        assert result.exit_code == 1
        assert "Error: rate_limited - try later" in result.output

    def test_blank_message(self, clean_env):
        """Test that a blank message is refused."""
        result = runner.invoke(app, ["ask", "   "])
        assert result.exit_code == 1
        assert "empty" in result.output

    def test_invalid_timeout(self, clean_env):
        """Test that an invalid timeout is reported."""
        result = runner.invoke(app, ["ask", "Hello", "--timeout=0"])
        assert result.exit_code == 1
        assert "invalid timeout" in result.output


class TestChatCommand:
    """Tests for the line-based chat command."""

    def test_conversation_then_quit(self, serve):
        """Test one exchange followed by quit."""
        serve(lambda request: httpx.Response(200, json={"response": "Try Kyoto."}))

        result = runner.invoke(app, ["chat"], input="Somewhere calm?\nquit\n")

        assert result.exit_code == 0
        assert "Try Kyoto." in result.output
        assert "Goodbye!" in result.output


def test_version():
    """Test the version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output
