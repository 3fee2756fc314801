"""
Vault engine for mdlogger.

This module provides wiki link parsing, vault path resolution, note lookup,
section editing for quick capture, and open-task collection and completion
for plain-text Markdown vaults.
"""

# Import all public classes and functions for clean external imports
from .daily_note_manager import DailyNoteManager, StrftimeFormatter
from .exceptions import (
    InvalidLinkSyntaxError,
    InvalidPayloadError,
    LineOutOfRangeError,
    MdloggerError,
    NoteNotFoundError,
    PathResolutionError,
    WriteFailureError,
)
from .link_parser import LinkParser, get_link_label
from .markdown_renderer import MarkdownRenderer
from .note_locator import NoteLocator
from .path_resolver import (
    normalize_absolute_path,
    resolve,
    resolve_vault_location,
    sanitize_file_name,
)
from .section_editor import detect_line_ending, insert_into_section
from .storage import FileSystemStorage, InMemoryStorage, NoteStorage
from .task_aggregator import collect_open_tasks_from_files
from .task_extractor import extract_tasks
from .task_service import TaskService, mark_task_completed
from .vault_client import VaultClient

__all__ = [
    # Main Client
    "VaultClient",
    # Components
    "LinkParser",
    "NoteLocator",
    "DailyNoteManager",
    "StrftimeFormatter",
    "TaskService",
    "MarkdownRenderer",
    # Storage
    "NoteStorage",
    "FileSystemStorage",
    "InMemoryStorage",
    # Pure transforms
    "get_link_label",
    "resolve",
    "resolve_vault_location",
    "normalize_absolute_path",
    "sanitize_file_name",
    "detect_line_ending",
    "insert_into_section",
    "extract_tasks",
    "collect_open_tasks_from_files",
    "mark_task_completed",
    # Exceptions
    "MdloggerError",
    "InvalidLinkSyntaxError",
    "PathResolutionError",
    "NoteNotFoundError",
    "InvalidPayloadError",
    "LineOutOfRangeError",
    "WriteFailureError",
]
