"""
TaskService - collecting open tasks and applying completion markers.

This module rewrites ``- [ ] text`` lines into
``- [x] text [completion: YYYY-MM-DD]`` and orchestrates batch completions
across files through an injected storage backend.
"""

import logging
from collections.abc import Iterable
from datetime import date

from ..models import (
    Location,
    SourceFile,
    TaskCompletionRequest,
    TaskGroup,
    TaskRef,
)
from .exceptions import InvalidPayloadError, LineOutOfRangeError
from .storage import NoteStorage
from .task_aggregator import collect_open_tasks_from_files
from .task_extractor import COMPLETED_TASK_MARKER, OPEN_TASK_MARKER

logger = logging.getLogger(__name__)


def _format_completion_date(completion_date: date | str) -> str:
    if isinstance(completion_date, date):
        return completion_date.isoformat()
    return completion_date


def mark_task_completed(
    content: str, line_index: int, completion_date: date | str
) -> str:
    """
    Mark the open task on one line as completed.

    The ``[ ]`` checkbox becomes ``[x]`` and `` [completion: DATE]`` is appended
    to the line as it stands, ahead of a CRLF line's ``\\r``. Every other line is
    left byte-identical and the line count never changes. A line without an
    open task is left as it is.

    Args:
        content: Note content
        line_index: 0-based index in the ``\\n`` split of the content
        completion_date: Date, or a ``YYYY-MM-DD`` string

    Returns:
        Updated content

    Raises:
        LineOutOfRangeError: If the line does not exist
    """
    lines = content.split("\n")
    if line_index < 0 or line_index >= len(lines):
        raise LineOutOfRangeError(line_index, len(lines))

    line = lines[line_index]
    carriage_return = "\r" if line.endswith("\r") else ""
    body = line.removesuffix("\r")

    stripped = body.lstrip()
    if not stripped.startswith(OPEN_TASK_MARKER):
        logger.debug(f"Line {line_index} holds no open task, leaving it unchanged")
        return content

    indent = body[: len(body) - len(stripped)]
    task_text = stripped[len(OPEN_TASK_MARKER) :]
    date_text = _format_completion_date(completion_date)

    lines[line_index] = (
        f"{indent}{COMPLETED_TASK_MARKER}{task_text} [completion: {date_text}]"
        f"{carriage_return}"
    )
    return "\n".join(lines)


class TaskService:
    """
    Collects open tasks from note files and completes them in batches.

    All file access goes through the injected storage. Files in a batch are
    processed one after another, each with exactly one read and one write.
    """

    def __init__(self, storage: NoteStorage):
        self.storage = storage
        self.logger = logging.getLogger(__name__)

    async def collect_tasks_from_locations(
        self, locations: Iterable[Location]
    ) -> list[TaskGroup]:
        """
        Read the given files and group their open tasks by text.

        Args:
            locations: Note files to scan; the file id is the base name

        Returns:
            List of TaskGroup objects
        """
        sources = []
        for location in locations:
            content = await self.storage.read(location)
            sources.append(
                SourceFile(id=location.name, content=content, location=location)
            )

        groups = collect_open_tasks_from_files(sources)
        self.logger.info(
            f"Collected {len(groups)} open task groups from {len(sources)} files"
        )
        return groups

    async def complete_task(
        self, location: Location, line_index: int, completion_date: date | str
    ) -> str:
        """Complete a single task line and return the written content."""
        return await self.complete_tasks(
            [TaskRef(location=location, line=line_index)], completion_date
        )

    async def complete_tasks(
        self, items: list[TaskRef], completion_date: date | str
    ) -> str:
        """
        Complete a batch of task lines across files.

        Lines are grouped per file in first-seen order and applied in
        ascending line order; every file is read once and written once.

        Args:
            items: (location, line) targets, possibly several per file
            completion_date: Date written into the completion marker

        Returns:
            Content of the last file written (the file first seen last)

        Raises:
            InvalidPayloadError: If the batch is empty
            LineOutOfRangeError: If a line is outside its file; that file is
                not written
        """
        if not items:
            raise InvalidPayloadError("No task items to complete")

        by_location: dict[Location, list[int]] = {}
        for item in items:
            by_location.setdefault(item.location, []).append(item.line)

        last_content = ""
        for location, lines in by_location.items():
            content = await self.storage.read(location)

            updated = content
            for line_index in sorted(lines):
                updated = mark_task_completed(updated, line_index, completion_date)

            await self.storage.write(location, updated)
            self.logger.info(f"Completed {len(lines)} task(s) in {location}")
            last_content = updated

        return last_content

    async def complete_group(
        self, request: TaskCompletionRequest, completion_date: date | str
    ) -> str:
        """
        Complete every occurrence listed in a task completion request.

        Raises:
            InvalidPayloadError: If the request has no text or no items
        """
        if not request.text.strip() or not request.items:
            raise InvalidPayloadError("Invalid task complete payload")

        return await self.complete_tasks(request.items, completion_date)
