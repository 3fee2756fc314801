"""
Custom exceptions for the vault engine.

This module contains all exception classes raised by link parsing, path
resolution, storage access and task completion.
"""


class MdloggerError(Exception):
    """Base exception for all mdlogger errors."""

    pass


class InvalidLinkSyntaxError(MdloggerError):
    """Raised when a wiki link has an empty page name."""

    pass


class PathResolutionError(MdloggerError):
    """Raised when a vault root and workspace combine into an unusable root."""

    pass


class NoteNotFoundError(MdloggerError):
    """Raised when a note file is read but does not exist."""

    pass


class InvalidPayloadError(MdloggerError):
    """Raised when a capture or completion request is empty or incomplete."""

    pass


class LineOutOfRangeError(MdloggerError):
    """Raised when a completion targets a line beyond the end of a file."""

    def __init__(self, line_index: int, line_count: int):
        self.line_index = line_index
        self.line_count = line_count
        super().__init__(
            f"Line {line_index} is out of range for content with {line_count} lines"
        )


class WriteFailureError(MdloggerError):
    """Raised when the underlying storage rejects a write."""

    pass
