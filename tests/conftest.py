"""
Shared pytest configuration and fixtures for the test suite.

This module provides common fixtures, test markers, and configuration
for all test categories (unit, integration, vault-specific).
"""

import os

import pytest

from mdlogger.models import Location
from mdlogger.settings import Settings
from mdlogger.vault import InMemoryStorage


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (touch the filesystem)",
    )
    config.addinivalue_line("markers", "vault: marks tests as vault-engine specific")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep MDLOGGER_* variables and config files of the host out of tests."""
    for key in list(os.environ):
        if key.startswith("MDLOGGER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def workspace_root():
    """Shared fixture for a local workspace root."""
    return Location.from_path("/test/workspace")


@pytest.fixture
def remote_workspace_root():
    """Shared fixture for a remote (ssh) workspace root."""
    return Location.from_string("vscode-remote://ssh-remote+devbox/home/me/project")


@pytest.fixture
def storage():
    """Shared fixture for an empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def settings():
    """Settings with daily notes under 'dailynotes' and no vault root."""
    return Settings(
        workspace_root="/test/workspace",
        vault_root="",
        daily_note_path="dailynotes",
        capture_section_name="Quick Notes",
    )


@pytest.fixture
def sample_daily_note():
    """Shared fixture for daily note content with a capture section."""
    return """# 2025-11-07

## Quick Notes
- [ ] 10:00 — First task
- [x] 09:00 — Done already

## Other Section
Some other content"""
