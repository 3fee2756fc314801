"""
NoteLocator for finding existing notes by title.

Looks a note up either at its flat location directly under the vault root or
anywhere below the vault root. Lookups never create files or directories.
"""

import logging

from ..models import Location, NoteHandle, VaultLocation
from .path_resolver import note_vault_location, resolve_vault_location
from .storage import NoteStorage


class NoteLocator:
    """
    Finds notes in a vault through an injected storage backend.

    Recursive searches visit files in lexicographic path order, so the first
    match is deterministic when several folders hold a note with the same
    name.
    """

    def __init__(self, storage: NoteStorage):
        self.storage = storage
        self.logger = logging.getLogger(__name__)

    async def find_by_title(
        self,
        title: str,
        workspace_root: Location,
        vault_root: str,
        extension: str = ".md",
        recursive: bool = False,
    ) -> NoteHandle | None:
        """
        Find an existing note whose file name is ``title + extension``.

        Args:
            title: Note title (already slugged and sanitized)
            workspace_root: Root of the open workspace
            vault_root: Configured vault root
            extension: Note file extension including the dot
            recursive: Search every folder below the vault root instead of
                checking only the flat location

        Returns:
            NoteHandle of the first match, or None if no note was found
        """
        if not recursive:
            flat = note_vault_location(workspace_root, vault_root, title, extension)
            if await self.storage.exists(flat.location):
                return NoteHandle(vault_location=flat, exists=True)
            return None

        target_name = f"{title}{extension}"
        root = resolve_vault_location(workspace_root, vault_root, "")

        for file_location in await self.storage.list_files(root.location):
            if file_location.name != target_name:
                continue

            relative_dir = file_location.parent.relative_to(root.location)
            self.logger.debug(f"Found note {target_name!r} at {file_location}")
            return NoteHandle(
                vault_location=VaultLocation(
                    workspace_root=workspace_root,
                    vault_root=root.vault_root,
                    relative_path="" if relative_dir == "." else relative_dir,
                    file_name=target_name,
                    location=file_location,
                ),
                exists=True,
            )

        self.logger.debug(f"No note named {target_name!r} under {root.location}")
        return None
