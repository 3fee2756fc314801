"""
VaultClient - Main interface for vault operations.

This module wires the link parser, note locator, daily note manager and task
service together behind one object that editor panels and the CLI call:
following wiki links, quick capture, listing open tasks and completing them.
"""

import logging
from datetime import date

from ..models import (
    CaptureResult,
    Location,
    NoteHandle,
    TaskCompletionRequest,
    TaskGroup,
)
from ..settings import Settings
from .daily_note_manager import DailyNoteManager
from .exceptions import InvalidLinkSyntaxError
from .link_parser import LinkParser
from .note_locator import NoteLocator
from .path_resolver import note_vault_location, sanitize_file_name
from .storage import NoteStorage
from .task_service import TaskService


class VaultClient:
    """
    Main interface for vault operations.

    Built once at the composition root from settings, a storage backend and
    the workspace root; every collaborator shares the same storage.
    """

    def __init__(
        self,
        settings: Settings,
        storage: NoteStorage,
        workspace_root: Location | None = None,
        daily_note_manager: DailyNoteManager | None = None,
    ):
        """
        Initialize the VaultClient.

        Args:
            settings: Vault and capture configuration
            storage: Storage backend used for all file access
            workspace_root: Workspace root (defaults to the configured one)
            daily_note_manager: Optional pre-built daily note manager
        """
        self.settings = settings
        self.storage = storage
        self.workspace_root = workspace_root or Location.from_string(
            settings.workspace_root
        )
        self.logger = logging.getLogger(__name__)

        # Initialize components
        self.link_parser = LinkParser(settings.slug_strategy)
        self.note_locator = NoteLocator(storage)
        self.daily_note_manager = daily_note_manager or DailyNoteManager(
            settings, storage
        )
        self.task_service = TaskService(storage)

        self.logger.info(f"Initialized VaultClient for workspace: {self.workspace_root}")

    async def resolve_link(self, link_text: str) -> NoteHandle:
        """
        Resolve a wiki link to a note location without creating anything.

        Args:
            link_text: Link text, with or without ``[[`` ``]]``

        Returns:
            NoteHandle; ``exists`` is False when the note still has to be
            created

        Raises:
            InvalidLinkSyntaxError: If the link has no usable page name
        """
        link = self.link_parser.parse(link_text)
        file_name = sanitize_file_name(
            self.link_parser.transform_file_name(link.page_name)
        )
        if not file_name:
            raise InvalidLinkSyntaxError(
                f"Link {link_text!r} does not yield a usable file name"
            )

        extension = self.settings.note_extension
        if self.settings.search_subdirectories:
            found = await self.note_locator.find_by_title(
                file_name,
                self.workspace_root,
                self.settings.vault_root,
                extension,
                recursive=True,
            )
            if found:
                return found

        flat = note_vault_location(
            self.workspace_root, self.settings.vault_root, file_name, extension
        )
        return NoteHandle(
            vault_location=flat, exists=await self.storage.exists(flat.location)
        )

    async def open_or_create_link(self, link_text: str) -> NoteHandle:
        """
        Resolve a wiki link, creating the note from the template if missing.

        Returns:
            NoteHandle of the existing or newly created note
        """
        handle = await self.resolve_link(link_text)
        if handle.exists:
            return handle

        await self.storage.create_directory(handle.location.parent)
        await self.storage.write(handle.location, self.settings.note_template)

        self.logger.info(f"Created note {handle.location} for link {link_text!r}")
        return handle.model_copy(update={"exists": True, "created": True})

    async def capture(
        self, content: str, section_name: str | None = None
    ) -> CaptureResult:
        """Append a timestamped capture line to today's daily note."""
        return await self.daily_note_manager.append_to_section(
            self.workspace_root, content, section_name
        )

    async def list_task_files(self) -> list[Location]:
        """
        List the note files scanned for open tasks.

        Only notes under the daily note folder are scanned, capped at
        ``max_task_files``.
        """
        directory = self.daily_note_manager.get_daily_note_directory(
            self.workspace_root
        )
        files = [
            location
            for location in await self.storage.list_files(directory)
            if location.name.endswith(self.settings.note_extension)
        ]

        max_files = self.settings.max_task_files
        if len(files) > max_files:
            self.logger.warning(
                f"Showing first {max_files} of {len(files)} daily note files; "
                f"older tasks may be omitted"
            )
            files = files[:max_files]

        return files

    async def collect_open_tasks(self) -> list[TaskGroup]:
        """Collect open tasks from the daily note folder, grouped by text."""
        return await self.task_service.collect_tasks_from_locations(
            await self.list_task_files()
        )

    async def complete_tasks(
        self,
        request: TaskCompletionRequest,
        completion_date: date | str | None = None,
    ) -> list[TaskGroup]:
        """
        Complete every occurrence in a request and return the refreshed groups.

        Args:
            request: Task text and the (location, line) occurrences to complete
            completion_date: Date of completion (defaults to today)

        Raises:
            InvalidPayloadError: If the request has no text or no items
        """
        await self.task_service.complete_group(
            request, completion_date or date.today()
        )
        return await self.collect_open_tasks()
