"""Tests for the server entry point."""

import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import sensory_tracker.__main__ as entrypoint
import sensory_tracker.main as main_module
from sensory_tracker.config import Settings


class TestEntrypoint:
    """python -m sensory_tracker."""

    def test_runs_app_factory(self, monkeypatch, caplog):
        calls = []
        monkeypatch.setattr(entrypoint, "get_settings", lambda: Settings(PORT=4321))
        monkeypatch.setattr(entrypoint.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

        with caplog.at_level(logging.INFO, logger="sensory_tracker"):
            entrypoint.main()

        (args, kwargs), = calls
        assert args == ("sensory_tracker.main:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 4321
        assert "Backend server running on port 4321" in caplog.text

    def test_import_builds_no_application(self):
        assert not hasattr(main_module, "app")
