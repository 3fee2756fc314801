"""
Storage backends for vault notes.

The engine never touches the filesystem directly; it talks to a
:class:`NoteStorage` injected at construction. This module provides the
abstract interface, a local filesystem backend and an in-memory backend.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path

from ..models import Location
from .exceptions import NoteNotFoundError, PathResolutionError, WriteFailureError

logger = logging.getLogger(__name__)

# Directories never descended into when listing a vault
IGNORED_DIRS = frozenset({".git", ".obsidian", ".trash", "node_modules"})


class NoteStorage(ABC):
    """Abstract interface for reading and writing note files."""

    @abstractmethod
    async def read(self, location: Location) -> str:
        """Read a file as text, raising NoteNotFoundError if it is absent."""
        pass

    @abstractmethod
    async def write(self, location: Location, content: str) -> None:
        """Create or overwrite a file."""
        pass

    @abstractmethod
    async def exists(self, location: Location) -> bool:
        """Check whether a file or directory exists."""
        pass

    @abstractmethod
    async def create_directory(self, location: Location) -> None:
        """Create a directory and its ancestors; a no-op if it exists."""
        pass

    @abstractmethod
    async def list_files(self, location: Location) -> list[Location]:
        """List every file below a directory, sorted by path."""
        pass


class FileSystemStorage(NoteStorage):
    """
    Storage backed by the local filesystem using direct file operations.

    Only ``file`` locations are accepted.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def _to_path(self, location: Location) -> Path:
        if not location.is_local:
            raise PathResolutionError(
                f"Filesystem storage cannot handle {location.scheme!r} locations: "
                f"{location}"
            )
        return Path(location.fs_path)

    async def read(self, location: Location) -> str:
        """
        Read a note file, falling back to legacy encodings when not UTF-8.

        Args:
            location: Location of the note file

        Returns:
            File content as a string

        Raises:
            NoteNotFoundError: If the file does not exist
        """
        path = self._to_path(location)

        if not path.is_file():
            raise NoteNotFoundError(f"Note not found: {location}")

        try:
            # newline="" keeps CRLF line endings intact
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError:
            # cp1252 leaves a few bytes undefined; latin-1 decodes anything
            encoding = "cp1252"
            try:
                with open(path, encoding=encoding, newline="") as f:
                    content = f.read()
            except UnicodeDecodeError:
                encoding = "latin-1"
                with open(path, encoding=encoding, newline="") as f:
                    content = f.read()

            self.logger.warning(f"Note {location} loaded with {encoding} encoding")
            return content

    async def write(self, location: Location, content: str) -> None:
        """
        Write a note file as UTF-8, creating or overwriting it.

        Raises:
            WriteFailureError: If the filesystem rejects the write
        """
        path = self._to_path(location)

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise WriteFailureError(f"Failed to write {location}: {e}") from e

        self.logger.info(f"Saved note to {location}")

    async def exists(self, location: Location) -> bool:
        return self._to_path(location).exists()

    async def create_directory(self, location: Location) -> None:
        path = self._to_path(location)

        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise WriteFailureError(f"Failed to create directory {location}: {e}") from e

    async def list_files(self, location: Location) -> list[Location]:
        """
        Walk a directory tree and return all files below it.

        Args:
            location: Directory to walk

        Returns:
            File locations sorted by path; empty if the directory is missing
        """
        root_path = self._to_path(location)
        if not root_path.is_dir():
            return []

        files = []
        for root, dirs, names in os.walk(root_path):
            # Skip ignored directories
            dirs[:] = [d for d in dirs if d not in IGNORED_DIRS]

            for name in names:
                files.append(Location.from_path(str(Path(root) / name)))

        files.sort(key=lambda loc: loc.path)
        self.logger.debug(f"Found {len(files)} files under {location}")
        return files


class InMemoryStorage(NoteStorage):
    """
    Dict-backed storage keyed by location.

    Counts reads and writes per location so callers can verify how often a
    file was touched.
    """

    def __init__(self, files: dict[Location, str] | None = None):
        self.files: dict[Location, str] = dict(files or {})
        self.directories: set[Location] = set()
        self.read_counts: Counter[Location] = Counter()
        self.write_counts: Counter[Location] = Counter()
        self.read_only: set[Location] = set()

    async def read(self, location: Location) -> str:
        self.read_counts[location] += 1
        if location not in self.files:
            raise NoteNotFoundError(f"Note not found: {location}")
        return self.files[location]

    async def write(self, location: Location, content: str) -> None:
        if location in self.read_only:
            raise WriteFailureError(f"Failed to write {location}: read-only")

        self.write_counts[location] += 1
        self.files[location] = content

    async def exists(self, location: Location) -> bool:
        return location in self.files or location in self.directories

    async def create_directory(self, location: Location) -> None:
        current = location
        while not current.is_filesystem_root:
            self.directories.add(current)
            current = current.parent

    async def list_files(self, location: Location) -> list[Location]:
        files = [
            loc
            for loc in self.files
            if loc != location and loc.is_relative_to(location)
        ]
        return sorted(files, key=lambda loc: loc.path)
