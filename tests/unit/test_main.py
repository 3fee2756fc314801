"""Tests for the mdlogger command line entry point."""

import argparse
import json
from datetime import date

import pytest

from mdlogger.main import build_client, build_parser, main, parse_completion_date
from mdlogger.settings import Settings


class TestParser:
    """Test argument parsing."""

    def test_capture_arguments(self):
        args = build_parser().parse_args(
            ["--workspace", "/ws", "capture", "hello", "--section", "Inbox"]
        )

        assert args.command == "capture"
        assert args.workspace == "/ws"
        assert args.text == "hello"
        assert args.section == "Inbox"

    def test_complete_date_is_parsed(self):
        args = build_parser().parse_args(["complete", "task", "--date", "Oct 30 2025"])

        assert args.date == date(2025, 10, 30)

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_invalid_date(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_completion_date("not a date")


def test_build_client_uses_workspace_override():
    settings = Settings(workspace_root="/configured")

    client = build_client(settings, "vscode-remote://ssh-remote+box/home/me")

    assert client.workspace_root.scheme == "vscode-remote"
    assert client.workspace_root.path == "/home/me"
    assert build_client(settings).workspace_root.path == "/configured"


class TestMain:
    """Run CLI commands against a temporary workspace."""

    def test_capture_then_complete(self, tmp_path, capsys):
        workspace = str(tmp_path)

        assert main(["--workspace", workspace, "capture", "Buy milk"]) == 0
        note_path, line = capsys.readouterr().out.strip().rsplit(":", 1)
        assert note_path.startswith(workspace)
        assert int(line) == 3

        assert main(["--workspace", workspace, "tasks"]) == 0
        groups = json.loads(capsys.readouterr().out)
        assert len(groups) == 1
        assert groups[0]["text"].endswith("— Buy milk")
        assert groups[0]["count"] == 1

        assert (
            main(
                [
                    "--workspace",
                    workspace,
                    "complete",
                    groups[0]["text"],
                    "--date",
                    "2025-10-30",
                ]
            )
            == 0
        )
        assert "Completed 1 occurrence(s); 0 open" in capsys.readouterr().out

        with open(note_path, encoding="utf-8") as f:
            assert "[completion: 2025-10-30]" in f.read()

    def test_complete_unknown_task(self, tmp_path):
        assert main(["--workspace", str(tmp_path), "complete", "nothing"]) == 1

    def test_open_creates_note(self, tmp_path, capsys):
        assert main(["--workspace", str(tmp_path), "open", "[[New Page|alias]]"]) == 0

        assert capsys.readouterr().out.startswith("created: ")
        assert (tmp_path / "New Page.md").is_file()

        assert main(["--workspace", str(tmp_path), "open", "New Page"]) == 0
        assert capsys.readouterr().out.startswith("found: ")

    def test_render(self, tmp_path, capsys):
        note = tmp_path / "note.md"
        note.write_text("See [[Other]]", encoding="utf-8")

        assert main(["--workspace", str(tmp_path), "render", str(note)]) == 0

        assert 'data-mdlg-wikilink="Other"' in capsys.readouterr().out

    def test_errors_exit_with_one(self, tmp_path):
        assert main(["--workspace", str(tmp_path), "capture", "   "]) == 1
        assert main(["--workspace", str(tmp_path), "open", "[[]]"]) == 1
