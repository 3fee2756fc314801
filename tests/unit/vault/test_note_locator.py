"""
Unit tests for the NoteLocator class.

These tests verify flat existence checks and recursive title searches
against an in-memory storage.
"""

import pytest

from mdlogger.models import Location
from mdlogger.vault import InMemoryStorage, NoteLocator


@pytest.fixture
def vault_storage():
    """Storage with a small vault under /test/workspace/vault."""
    files = {
        "/test/workspace/vault/Inbox.md": "# Inbox",
        "/test/workspace/vault/projects/Plan.md": "# Plan (projects)",
        "/test/workspace/vault/archive/Plan.md": "# Plan (archive)",
        "/test/workspace/vault/archive/2024/Old.md": "# Old",
        "/test/workspace/vault/notes.txt": "plain",
    }
    return InMemoryStorage({Location.from_path(p): c for p, c in files.items()})


@pytest.fixture
def locator(vault_storage):
    return NoteLocator(vault_storage)


class TestNoteLocator:
    """Tests for NoteLocator.find_by_title()."""

    @pytest.mark.asyncio
    async def test_flat_lookup_finds_note(self, locator, workspace_root):
        handle = await locator.find_by_title(
            "Inbox", workspace_root, "vault", ".md", recursive=False
        )

        assert handle is not None
        assert handle.exists is True
        assert handle.location.path == "/test/workspace/vault/Inbox.md"
        assert handle.vault_location.file_name == "Inbox.md"

    @pytest.mark.asyncio
    async def test_flat_lookup_ignores_subfolders(self, locator, workspace_root):
        handle = await locator.find_by_title(
            "Plan", workspace_root, "vault", ".md", recursive=False
        )

        assert handle is None

    @pytest.mark.asyncio
    async def test_flat_lookup_does_not_walk(
        self, locator, vault_storage, workspace_root, monkeypatch
    ):
        async def fail_listing(location):
            raise AssertionError("flat lookup must not list files")

        monkeypatch.setattr(vault_storage, "list_files", fail_listing)

        handle = await locator.find_by_title(
            "Inbox", workspace_root, "vault", ".md", recursive=False
        )

        assert handle is not None

    @pytest.mark.asyncio
    async def test_recursive_lookup_returns_first_in_path_order(
        self, locator, workspace_root
    ):
        handle = await locator.find_by_title(
            "Plan", workspace_root, "vault", ".md", recursive=True
        )

        assert handle is not None
        # "archive/" sorts before "projects/"
        assert handle.location.path == "/test/workspace/vault/archive/Plan.md"
        assert handle.vault_location.relative_path == "archive"
        assert handle.vault_location.file_name == "Plan.md"

    @pytest.mark.asyncio
    async def test_recursive_lookup_nested(self, locator, workspace_root):
        handle = await locator.find_by_title(
            "Old", workspace_root, "vault", ".md", recursive=True
        )

        assert handle is not None
        assert handle.vault_location.relative_path == "archive/2024"

    @pytest.mark.asyncio
    async def test_recursive_lookup_top_level(self, locator, workspace_root):
        handle = await locator.find_by_title(
            "Inbox", workspace_root, "vault", ".md", recursive=True
        )

        assert handle is not None
        assert handle.vault_location.relative_path == ""

    @pytest.mark.asyncio
    async def test_extension_must_match(self, locator, workspace_root):
        assert (
            await locator.find_by_title(
                "notes", workspace_root, "vault", ".md", recursive=True
            )
            is None
        )
        assert (
            await locator.find_by_title(
                "notes", workspace_root, "vault", ".txt", recursive=True
            )
            is not None
        )

    @pytest.mark.asyncio
    async def test_not_found(self, locator, workspace_root):
        handle = await locator.find_by_title(
            "Missing", workspace_root, "vault", ".md", recursive=True
        )

        assert handle is None

    @pytest.mark.asyncio
    async def test_lookup_has_no_side_effects(
        self, locator, vault_storage, workspace_root
    ):
        before = dict(vault_storage.files)

        await locator.find_by_title("Missing", workspace_root, "vault", ".md", True)
        await locator.find_by_title("Missing", workspace_root, "vault", ".md", False)

        assert vault_storage.files == before
        assert not vault_storage.directories
        assert sum(vault_storage.write_counts.values()) == 0
