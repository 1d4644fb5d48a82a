"""Pytest configuration and fixtures for prioritizer-mcp tests."""

import logging
from unittest.mock import patch

import pytest

import prioritizer_mcp.auth as auth_module
import prioritizer_mcp.store as store_module
from prioritizer_mcp.config import Settings

from .fakes import FakeTaskStore


@pytest.fixture
def demo_settings():
    """Settings with demo tokens enabled and no external services."""
    return Settings(demo_mode=True)


@pytest.fixture
def google_settings():
    """Settings for real Google token verification."""
    return Settings(demo_mode=False, google_client_id="test-client-id")


@pytest.fixture
def store():
    """An empty in-memory task store."""
    return FakeTaskStore()


@pytest.fixture
def wired(store, demo_settings):
    """Point the endpoint tools at the fake store and demo settings."""
    with (
        patch("prioritizer_mcp.tools.endpoints.get_task_store", return_value=store),
        patch("prioritizer_mcp.tools.endpoints.get_settings", return_value=demo_settings),
    ):
        yield store


@pytest.fixture
def failing_store(demo_settings):
    """Point the endpoint tools at a store whose every call fails."""
    failing = FakeTaskStore(fail=True)
    with (
        patch("prioritizer_mcp.tools.endpoints.get_task_store", return_value=failing),
        patch("prioritizer_mcp.tools.endpoints.get_settings", return_value=demo_settings),
    ):
        yield failing


@pytest.fixture(autouse=True)
def reset_cached_clients(monkeypatch):
    """Drop the process-wide MongoClient and Google transport between tests."""
    monkeypatch.setattr(store_module, "_client", None)
    monkeypatch.setattr(auth_module, "_google_request", None)


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
