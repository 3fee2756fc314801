"""
Vault and note data models using Pydantic v2.

This module contains the data structures shared by the path resolver, the
note locator, the section editor and the task engine: locations, parsed
links, task occurrences and their groups.
"""

import posixpath
import re
from urllib.parse import unquote, urlsplit

from pydantic import ConfigDict, Field, computed_field, field_validator

from .base import BaseMdloggerModel

_DRIVE_LETTER = re.compile(r"^[A-Za-z]:")
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")
_DRIVE_ROOT = re.compile(r"^/[A-Za-z]:/?$")
_REPEATED_SLASHES = re.compile(r"/+")


def _normalize_location_path(value: str) -> str:
    path = value.replace("\\", "/")
    if _DRIVE_LETTER.match(path):
        path = "/" + path
    if not path.startswith("/"):
        path = "/" + path
    path = posixpath.normpath(_REPEATED_SLASHES.sub("/", path))
    # normpath keeps a POSIX-significant double leading slash
    return _REPEATED_SLASHES.sub("/", path)


class Location(BaseMdloggerModel):
    """
    A concrete storage location: scheme, authority and an absolute path.

    Local files use the ``file`` scheme with an empty authority. Remote
    workspaces keep their own scheme and authority, e.g.
    ``vscode-remote://ssh-remote+host/home/me/notes``.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(default="file", description="URI scheme")
    authority: str = Field(default="", description="URI authority (host part)")
    path: str = Field(description="Absolute path with forward slashes")

    @field_validator("path")
    @classmethod
    def normalize_path(cls, v: str) -> str:
        return _normalize_location_path(v)

    @classmethod
    def from_path(cls, path: str) -> "Location":
        """Build a local ``file`` location from a filesystem path."""
        return cls(path=str(path))

    @classmethod
    def from_string(cls, value: str) -> "Location":
        """Parse ``scheme://authority/path`` or a bare local path."""
        if "://" not in value:
            return cls.from_path(value)

        parts = urlsplit(value)
        return cls(
            scheme=parts.scheme,
            authority=parts.netloc,
            path=unquote(parts.path) or "/",
        )

    @property
    def is_local(self) -> bool:
        return self.scheme == "file"

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def parent(self) -> "Location":
        return self.with_path(posixpath.dirname(self.path))

    @property
    def fs_path(self) -> str:
        """Native path for local locations (drive letters lose their slash)."""
        if _DRIVE_PATH.match(self.path):
            return self.path[1:]
        return self.path

    @property
    def is_filesystem_root(self) -> bool:
        return self.path == "/" or bool(_DRIVE_ROOT.match(self.path))

    def with_path(self, path: str) -> "Location":
        """Return a location with the same scheme and authority but a new path."""
        return Location(scheme=self.scheme, authority=self.authority, path=path)

    def join(self, *segments: str) -> "Location":
        """Append path segments, skipping empty ones and resolving ``.``/``..``."""
        parts = [self.path]
        parts.extend(segment.replace("\\", "/") for segment in segments if segment)
        return self.with_path("/".join(parts))

    def is_relative_to(self, other: "Location") -> bool:
        if (self.scheme, self.authority) != (other.scheme, other.authority):
            return False
        base = other.path.rstrip("/")
        return self.path == other.path or self.path.startswith(base + "/")

    def relative_to(self, other: "Location") -> str:
        if not self.is_relative_to(other):
            raise ValueError(f"{self} is not located under {other}")
        return posixpath.relpath(self.path, other.path)

    # Equality ignores which fields were set explicitly at construction
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (self.scheme, self.authority, self.path) == (
            other.scheme,
            other.authority,
            other.path,
        )

    def __hash__(self) -> int:
        return hash((self.scheme, self.authority, self.path))

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"


class LinkReference(BaseMdloggerModel):
    """A parsed ``[[pageName#heading|alias]]`` reference."""

    raw_text: str = Field(description="Link text between the double brackets")
    page_name: str = Field(description="Target page name")
    alias: str | None = Field(default=None, description="Display alias")
    heading_fragment: str | None = Field(
        default=None, description="Heading fragment after '#'"
    )
    display_label: str = Field(description="Label shown for the link")

    def __str__(self) -> str:
        return f"[[{self.raw_text}]]"


class VaultLocation(BaseMdloggerModel):
    """The inputs of a vault path resolution together with its result."""

    workspace_root: Location = Field(description="Workspace root location")
    vault_root: str = Field(
        default="", description="Configured vault root (empty, relative or absolute)"
    )
    relative_path: str = Field(default="", description="Path below the vault root")
    file_name: str | None = Field(default=None, description="Optional file name")
    location: Location = Field(description="Resolved location")


class NoteHandle(BaseMdloggerModel):
    """A resolved note location and whether a file exists there."""

    vault_location: VaultLocation
    exists: bool = Field(description="Whether the note file exists")
    created: bool = Field(
        default=False, description="True when the file was created by this call"
    )

    @property
    def location(self) -> Location:
        return self.vault_location.location


class TaskOccurrence(BaseMdloggerModel):
    """One open checklist line in one file."""

    text: str = Field(description="Checklist text after the '- [ ] ' marker")
    source_file_id: str = Field(default="", description="Identifier of the file")
    source_location: Location | None = Field(
        default=None, description="Location of the source file"
    )
    line_index: int = Field(ge=0, description="0-based line index on '\\n' split")

    def __str__(self) -> str:
        return f"- [ ] {self.text}"


class TaskGroup(BaseMdloggerModel):
    """Open task occurrences sharing the same literal text across files."""

    text: str = Field(description="Shared task text")
    files: list[str] = Field(
        default_factory=list, description="Distinct file ids, first-seen order"
    )
    items: list[TaskOccurrence] = Field(
        default_factory=list, description="Every occurrence, file then line order"
    )

    @computed_field
    @property
    def count(self) -> int:
        """Number of occurrences in the group."""
        return len(self.items)


class SectionInsertionResult(BaseMdloggerModel):
    """Result of inserting a line into a note section."""

    new_content: str
    inserted_line_index: int = Field(ge=0)


class SourceFile(BaseMdloggerModel):
    """A file's identifier and content, as fed to the task aggregator."""

    id: str
    content: str
    location: Location | None = None


class TaskRef(BaseMdloggerModel):
    """A single (file, line) completion target."""

    location: Location
    line: int = Field(ge=0)


class TaskCompletionRequest(BaseMdloggerModel):
    """Payload for completing every listed occurrence of a task."""

    text: str = ""
    items: list[TaskRef] = Field(default_factory=list)

    @classmethod
    def from_group(cls, group: TaskGroup) -> "TaskCompletionRequest":
        return cls(
            text=group.text,
            items=[
                TaskRef(location=item.source_location, line=item.line_index)
                for item in group.items
                if item.source_location is not None
            ],
        )


class CaptureResult(BaseMdloggerModel):
    """Where a quick capture landed."""

    location: Location
    line: int = Field(ge=0)


# Type aliases for common collections
TaskList = list[TaskOccurrence]
TaskGroupList = list[TaskGroup]
