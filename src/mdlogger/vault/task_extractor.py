"""
Open checklist extraction.

Scans note content for ``- [ ] text`` lines. Line indices are positions in
the ``\\n`` split of the content, so they stay valid for CRLF notes.
"""

from ..models import Location, TaskOccurrence

OPEN_TASK_MARKER = "- [ ] "
COMPLETED_TASK_MARKER = "- [x] "


def parse_open_task(line: str) -> str | None:
    """Return the trimmed text of an open task line (possibly empty), or None."""
    stripped = line.removesuffix("\r").lstrip()
    if not stripped.startswith(OPEN_TASK_MARKER):
        return None

    return stripped[len(OPEN_TASK_MARKER) :].strip()


def extract_tasks(
    content: str,
    source_file_id: str = "",
    source_location: Location | None = None,
) -> list[TaskOccurrence]:
    """
    Extract open checklist items from note content.

    Args:
        content: Note content
        source_file_id: Identifier stored on every occurrence
        source_location: Location stored on every occurrence

    Returns:
        TaskOccurrence objects in line order; checked items are skipped and
        an open task with no text yields an empty ``text``
    """
    tasks = []
    for i, line in enumerate(content.split("\n")):
        text = parse_open_task(line)
        if text is None:
            continue

        tasks.append(
            TaskOccurrence(
                text=text,
                source_file_id=source_file_id,
                source_location=source_location,
                line_index=i,
            )
        )

    return tasks
