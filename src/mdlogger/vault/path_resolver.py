"""
Vault path resolution and file name sanitizing.

Combines a workspace root, a configured vault root (empty, relative or
absolute), a relative sub-path and an optional file name into one concrete
location, for local and remote workspaces alike.
"""

import logging
import re

from ..models import Location, VaultLocation
from .exceptions import PathResolutionError

logger = logging.getLogger(__name__)

_ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\:*?"<>|]')
_WHITESPACE_RUN = re.compile(r"\s+")
_DRIVE_LETTER = re.compile(r"^[A-Za-z]:")
_REPEATED_SLASHES = re.compile(r"/+")


def sanitize_file_name(name: str) -> str:
    """Strip characters illegal on common filesystems and tidy whitespace.

    Args:
        name: Candidate file name

    Returns:
        The name without ``/ \\ : * ? " < > |``, with whitespace runs
        collapsed to single spaces and trimmed
    """
    cleaned = _ILLEGAL_FILENAME_CHARS.sub("", name)
    return _WHITESPACE_RUN.sub(" ", cleaned).strip()


def is_absolute_vault_root(vault_root: str) -> bool:
    """Check if a vault root is an absolute Unix or Windows path."""
    return vault_root.startswith(("/", "\\")) or bool(_DRIVE_LETTER.match(vault_root))


def normalize_absolute_path(absolute_path: str) -> str:
    """Normalize an absolute path for use as a remote location path.

    Backslashes become forward slashes, a single leading slash is forced and
    repeated slashes are collapsed.
    """
    normalized = absolute_path.replace("\\", "/")
    if not normalized.startswith("/"):
        normalized = "/" + normalized
    return _REPEATED_SLASHES.sub("/", normalized)


def _resolve_base(workspace_root: Location, vault_root: str) -> Location:
    if not vault_root:
        return workspace_root

    if not is_absolute_vault_root(vault_root):
        return workspace_root.join(vault_root)

    if workspace_root.is_local:
        return Location.from_path(vault_root)

    return workspace_root.with_path(normalize_absolute_path(vault_root))


def resolve_vault_location(
    workspace_root: Location,
    vault_root: str,
    relative_path: str,
    file_name: str | None = None,
) -> VaultLocation:
    """
    Resolve a vault-relative path to a concrete location.

    Args:
        workspace_root: Root of the open workspace
        vault_root: Configured vault root; empty, relative to the workspace,
            or absolute
        relative_path: Path below the vault root (may be empty)
        file_name: Optional file name appended last

    Returns:
        VaultLocation carrying the inputs and the resolved location

    Raises:
        PathResolutionError: If the directory the path is built on is a
            filesystem root
    """
    vault_root = (vault_root or "").strip()
    base = _resolve_base(workspace_root, vault_root)

    if base.is_filesystem_root:
        raise PathResolutionError(
            f"Vault root {vault_root!r} with workspace {workspace_root} "
            f"resolves to the filesystem root {base}"
        )

    location = base.join(relative_path, file_name or "")
    logger.debug(f"Resolved {relative_path!r}/{file_name!r} to {location}")

    return VaultLocation(
        workspace_root=workspace_root,
        vault_root=vault_root,
        relative_path=relative_path,
        file_name=file_name,
        location=location,
    )


def resolve(
    workspace_root: Location,
    vault_root: str,
    relative_path: str,
    file_name: str | None = None,
) -> Location:
    """Resolve a vault-relative path and return only the location."""
    return resolve_vault_location(
        workspace_root, vault_root, relative_path, file_name
    ).location


def note_vault_location(
    workspace_root: Location, vault_root: str, title: str, extension: str
) -> VaultLocation:
    """Resolve the flat ``vault_root/title+extension`` note location."""
    return resolve_vault_location(workspace_root, vault_root, "", f"{title}{extension}")
