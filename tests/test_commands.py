"""Tests for the serve management command."""

from unittest.mock import patch

from django.core.management import call_command


class TestServeCommand:
    """Tests for `manage.py serve`."""

    def test_uses_port_setting(self, settings) -> None:
        """The listen port comes from the PORT setting by default."""
        settings.PORT = 4321
        with patch("uvicorn.run") as mock_run:
            call_command("serve")
        mock_run.assert_called_once_with("config.asgi:application", host="0.0.0.0", port=4321)  # noqa: S104

    def test_port_option_overrides_setting(self) -> None:
        """An explicit --port wins over the setting."""
        with patch("uvicorn.run") as mock_run:
            call_command("serve", "--port", "8080", "--host", "127.0.0.1")
        mock_run.assert_called_once_with("config.asgi:application", host="127.0.0.1", port=8080)
