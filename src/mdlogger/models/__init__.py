"""
Shared data models for mdlogger.
"""

from .base import BaseMdloggerModel
from .notes import (
    CaptureResult,
    LinkReference,
    Location,
    NoteHandle,
    SectionInsertionResult,
    SourceFile,
    TaskCompletionRequest,
    TaskGroup,
    TaskGroupList,
    TaskList,
    TaskOccurrence,
    TaskRef,
    VaultLocation,
)

__all__ = [
    "BaseMdloggerModel",
    # Locations
    "Location",
    "VaultLocation",
    "NoteHandle",
    # Links
    "LinkReference",
    # Tasks
    "TaskOccurrence",
    "TaskGroup",
    "TaskRef",
    "TaskCompletionRequest",
    "SourceFile",
    # Editing results
    "SectionInsertionResult",
    "CaptureResult",
    # Type aliases
    "TaskList",
    "TaskGroupList",
]
