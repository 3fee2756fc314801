"""
Command line entry point for mdlogger.

This is the composition root: settings, storage and the vault client are
built here once and handed to the command that runs.
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from dateutil import parser as date_parser

from .models import Location, TaskCompletionRequest
from .settings import Settings, get_settings
from .vault import (
    FileSystemStorage,
    MarkdownRenderer,
    MdloggerError,
    VaultClient,
)

logger = logging.getLogger(__name__)


def parse_completion_date(value: str) -> date:
    """Parse a loosely written date such as ``2025-10-30`` or ``Oct 30 2025``."""
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"Invalid date: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlogger", description="Quick capture and task tools for a note vault"
    )
    parser.add_argument(
        "--workspace", help="Workspace root (local path or scheme://authority/path)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    capture = subparsers.add_parser("capture", help="Append a line to today's note")
    capture.add_argument("text")
    capture.add_argument("--section", help="Section heading to capture into")

    subparsers.add_parser("tasks", help="List open tasks from daily notes")

    complete = subparsers.add_parser("complete", help="Complete an open task")
    complete.add_argument("text", help="Exact task text")
    complete.add_argument(
        "--date", type=parse_completion_date, help="Completion date (default today)"
    )

    open_link = subparsers.add_parser("open", help="Resolve or create a linked note")
    open_link.add_argument("link", help="Link text such as '[[Page|Alias]]'")

    render = subparsers.add_parser("render", help="Render a note to HTML")
    render.add_argument("file", type=Path)

    return parser


def build_client(settings: Settings, workspace: str | None = None) -> VaultClient:
    """Construct the vault client with local filesystem storage."""
    workspace_root = Location.from_string(workspace or settings.workspace_root)
    return VaultClient(settings, FileSystemStorage(), workspace_root=workspace_root)


async def run_command(args: argparse.Namespace, client: VaultClient) -> int:
    if args.command == "capture":
        result = await client.capture(args.text, args.section)
        print(f"{result.location.fs_path}:{result.line + 1}")
        return 0

    if args.command == "tasks":
        groups = await client.collect_open_tasks()
        print(json.dumps([g.model_dump_payload() for g in groups], indent=2))
        return 0

    if args.command == "complete":
        groups = await client.collect_open_tasks()
        matching = [g for g in groups if g.text == args.text]
        if not matching:
            logger.error(f"No open task with text: {args.text!r}")
            return 1

        request = TaskCompletionRequest.from_group(matching[0])
        remaining = await client.complete_tasks(request, args.date)
        print(f"Completed {len(request.items)} occurrence(s); {len(remaining)} open")
        return 0

    if args.command == "open":
        handle = await client.open_or_create_link(args.link)
        status = "created" if handle.created else "found"
        print(f"{status}: {handle.location.fs_path}")
        return 0

    if args.command == "render":
        content = await client.storage.read(Location.from_path(str(args.file.resolve())))
        print(MarkdownRenderer().render(content))
        return 0

    return 2


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the mdlogger CLI."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    client = build_client(settings, args.workspace)
    try:
        return asyncio.run(run_command(args, client))
    except MdloggerError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
