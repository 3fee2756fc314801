"""
DailyNoteManager for date-based notes and quick capture.

Resolves where a day's note lives, creates it from a template when missing
and appends timestamped capture lines into a named section.
"""

import logging
from datetime import date, datetime

from ..models import CaptureResult, Location, NoteHandle, VaultLocation
from ..settings import Settings
from .exceptions import InvalidPayloadError, NoteNotFoundError
from .path_resolver import resolve_vault_location, sanitize_file_name
from .section_editor import insert_into_section
from .storage import NoteStorage


class StrftimeFormatter:
    """Formats dates and times with ``strftime`` patterns."""

    def format_date(self, day: date, fmt: str) -> str:
        return day.strftime(fmt)

    def format_time(self, moment: datetime, fmt: str) -> str:
        return moment.strftime(fmt)


class DailyNoteManager:
    """
    Manages daily note creation and capture into daily notes.

    Handles file naming, path resolution, template loading and directory
    creation for date-based notes following the configured settings.
    """

    def __init__(
        self,
        settings: Settings,
        storage: NoteStorage,
        formatter: StrftimeFormatter | None = None,
    ):
        self.settings = settings
        self.storage = storage
        self.formatter = formatter or StrftimeFormatter()
        self.logger = logging.getLogger(__name__)

    def get_daily_note_file_name(self, day: date) -> str:
        """Return the file name of the daily note for a date, with extension."""
        formatted = sanitize_file_name(
            self.formatter.format_date(day, self.settings.date_format)
        )
        return f"{formatted}{self.settings.note_extension}"

    def get_daily_note_vault_location(
        self, workspace_root: Location, day: date
    ) -> VaultLocation:
        return resolve_vault_location(
            workspace_root,
            self.settings.vault_root,
            self.settings.daily_note_path,
            self.get_daily_note_file_name(day),
        )

    def get_daily_note_location(self, workspace_root: Location, day: date) -> Location:
        return self.get_daily_note_vault_location(workspace_root, day).location

    def get_daily_note_directory(self, workspace_root: Location) -> Location:
        """Return the folder holding all daily notes."""
        return resolve_vault_location(
            workspace_root, self.settings.vault_root, self.settings.daily_note_path
        ).location

    async def get_template_content(self, workspace_root: Location) -> str:
        """
        Load the configured daily note template.

        Returns:
            Template content, or an empty string when no template is
            configured or the template file does not exist
        """
        template_path = self.settings.daily_note_template.strip()
        if not template_path:
            return ""

        template_location = resolve_vault_location(
            workspace_root, self.settings.vault_root, template_path
        ).location

        try:
            return await self.storage.read(template_location)
        except NoteNotFoundError:
            self.logger.warning(f"Daily note template not found: {template_location}")
            return ""

    async def ensure_daily_note_exists(
        self, workspace_root: Location, day: date | None = None
    ) -> NoteHandle:
        """
        Ensure the daily note exists, creating it from the template if not.

        Args:
            workspace_root: Root of the open workspace
            day: Date of the note (defaults to today)

        Returns:
            NoteHandle of the daily note; ``created`` tells whether it was
            written by this call
        """
        vault_location = self.get_daily_note_vault_location(
            workspace_root, day or date.today()
        )
        location = vault_location.location

        if await self.storage.exists(location):
            return NoteHandle(vault_location=vault_location, exists=True)

        template = await self.get_template_content(workspace_root)
        await self.storage.create_directory(location.parent)
        await self.storage.write(location, template)

        self.logger.info(f"Created daily note {location}")
        return NoteHandle(vault_location=vault_location, exists=True, created=True)

    async def append_to_section(
        self,
        workspace_root: Location,
        content: str,
        section_name: str | None = None,
        day: date | None = None,
        now: datetime | None = None,
    ) -> CaptureResult:
        """
        Append a captured line to a section of a daily note.

        The note and the section are created when missing. The line is
        written as ``- [ ] {time} — {content}``.

        Args:
            workspace_root: Root of the open workspace
            content: Single-line capture text
            section_name: Section heading (defaults to the capture section)
            day: Date of the daily note (defaults to today)
            now: Capture time used for the timestamp (defaults to now)

        Returns:
            CaptureResult with the note location and inserted line index

        Raises:
            InvalidPayloadError: If the capture text is blank or spans lines
        """
        text = (content or "").strip()
        if not text:
            raise InvalidPayloadError("Empty capture")
        if "\n" in text or "\r" in text:
            raise InvalidPayloadError("Capture text must be a single line")

        target_section = section_name or self.settings.capture_section_name
        now = now or datetime.now()

        handle = await self.ensure_daily_note_exists(workspace_root, day or now.date())
        note_content = await self.storage.read(handle.location)

        time_string = self.formatter.format_time(now, self.settings.time_format)
        line_text = f"- [ ] {time_string} — {text}"

        result = insert_into_section(note_content, target_section, line_text)
        await self.storage.write(handle.location, result.new_content)

        self.logger.info(
            f"Captured into {handle.location} ({target_section}) "
            f"at line {result.inserted_line_index}"
        )
        return CaptureResult(location=handle.location, line=result.inserted_line_index)
