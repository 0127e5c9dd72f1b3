"""Tests for the command-line entry point."""

import pytest

from devman import __main__ as entrypoint
from devman.core import settings


class TestMain:
    """``python -m devman`` starts uvicorn on the app."""

    def test_defaults_from_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
        )

        entrypoint.main([])

        app, kwargs = calls[0]
        assert app == "devman.main:app"
        assert kwargs["host"] == settings.host
        assert kwargs["port"] == settings.port
        assert kwargs["reload"] is False

    def test_overrides(self, monkeypatch):
        calls = []
        monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

        entrypoint.main(["--host", "0.0.0.0", "--port", "9000", "--reload"])

        assert calls == [
            {
                "host": "0.0.0.0",
                "port": 9000,
                "reload": True,
                "access_log": False,
                "log_level": settings.log_level.lower(),
            }
        ]

    def test_rejects_non_numeric_port(self):
        with pytest.raises(SystemExit):
            entrypoint.main(["--port", "http"])
