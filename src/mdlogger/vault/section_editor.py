"""
Section editing for plain-text notes.

Pure string transforms: insert a line under a level-2 heading, creating the
heading when it is missing, while keeping the note's line-ending style.
Lines are handled as a ``\\n`` split where CRLF lines keep their trailing
``\\r``, so untouched lines round-trip byte for byte.
"""

import re

from ..models import SectionInsertionResult

# A heading of level 1 or 2 ends the current section
_SECTION_BOUNDARY = re.compile(r"^#{1,2}(?:\s|$)")


def detect_line_ending(content: str) -> str:
    """Return ``"\\r\\n"`` if the content has any CRLF sequence, else ``"\\n"``."""
    return "\r\n" if "\r\n" in content else "\n"


def _append_line(lines: list[str], text: str, carriage_return: str) -> None:
    # The current last line gains a line break before the new one follows it
    if carriage_return and not lines[-1].endswith(carriage_return):
        lines[-1] += carriage_return
    lines.append(text)


def _insert_line(
    lines: list[str], index: int, text: str, carriage_return: str
) -> None:
    if index >= len(lines):
        _append_line(lines, text, carriage_return)
    else:
        lines.insert(index, text + carriage_return)


def find_section_heading(lines: list[str], section_heading: str) -> int | None:
    """Return the index of the first ``## {section_heading}`` line, if any."""
    heading = f"## {section_heading}"
    for i, line in enumerate(lines):
        if line.strip() == heading:
            return i
    return None


def find_section_end(lines: list[str], heading_index: int) -> int:
    """
    Return the index right after the last body line of a section.

    The body runs up to the next level-1 or level-2 heading (or the end of
    the file); blank lines trailing the body are not part of it.
    """
    end = len(lines)
    for i in range(heading_index + 1, len(lines)):
        if _SECTION_BOUNDARY.match(lines[i].strip()):
            end = i
            break

    while end > heading_index + 1 and not lines[end - 1].strip():
        end -= 1

    return end


def insert_into_section(
    content: str, section_heading: str, line_text: str
) -> SectionInsertionResult:
    """
    Insert a line as the last line of a named section.

    If no ``## {section_heading}`` line exists, the section is appended to
    the end of the note, separated from previous content by a blank line.

    Args:
        content: Current note content (may be empty)
        section_heading: Heading text without the ``## `` prefix
        line_text: Line to insert, without a line break

    Returns:
        SectionInsertionResult with the new content and the 0-based index of
        the inserted line
    """
    carriage_return = "\r" if detect_line_ending(content) == "\r\n" else ""
    lines = content.split("\n")

    heading_index = find_section_heading(lines, section_heading)

    if heading_index is not None:
        index = find_section_end(lines, heading_index)
        _insert_line(lines, index, line_text, carriage_return)
        inserted = index
    else:
        if lines[-1].strip():
            _append_line(lines, "", carriage_return)
        _append_line(lines, f"## {section_heading}", carriage_return)
        _append_line(lines, line_text, carriage_return)
        inserted = len(lines) - 1

    return SectionInsertionResult(
        new_content="\n".join(lines), inserted_line_index=inserted
    )
