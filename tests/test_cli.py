"""CLI tests for xcopen using Click's CliRunner."""

import json
from pathlib import Path

from click.testing import CliRunner

from xcopen.cli import main
from xcopen.exceptions import LaunchError


def test_no_arguments_opens_workspace(cli_launcher, project_dir: Path):
    (project_dir / "App.xcworkspace").mkdir()
    (project_dir / "App.xcodeproj").mkdir()

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0
    assert result.output == ""
    assert cli_launcher.opened() == [str(project_dir / "App.xcworkspace")]


def test_background_short_flags(cli_launcher, project_dir: Path):
    (project_dir / "App.xcodeproj").mkdir()

    for flag in ("-b", "-g", "--background"):
        result = CliRunner().invoke(main, [flag])
        assert result.exit_code == 0

    assert [call[2] for call in cli_launcher.launches()] == [True, True, True]
    assert ("activate",) not in cli_launcher.calls


def test_new_flag_creates_files(cli_launcher, project_dir: Path):
    result = CliRunner().invoke(main, ["-n", "a.swift", "b.swift"])

    assert result.exit_code == 0
    assert (project_dir / "a.swift").exists()
    assert (project_dir / "b.swift").exists()


def test_new_keyword_without_files_fails(cli_launcher):
    result = CliRunner().invoke(main, ["new"])

    assert result.exit_code == 1
    assert "Error: No new files to create." in result.output


def test_bogus_playground_type_fails(cli_launcher, project_dir: Path):
    result = CliRunner().invoke(main, ["pg", "bogus"])

    assert result.exit_code == 1
    assert "Unsupported playground type" in result.output
    assert list(project_dir.iterdir()) == []


def test_playground_folder_and_no_open(cli_launcher, project_dir: Path):
    result = CliRunner().invoke(main, ["-e", "--no-open", "pgw", "mac"])

    assert result.exit_code == 0
    folder = project_dir / "macOS Playground"
    assert (folder / "macOS.playground").is_dir()
    assert (folder / "macOS.xcworkspace" / "contents.xcworkspacedata").exists()
    assert cli_launcher.launches() == []


def test_assets_prints_skip_notices(cli_launcher, project_dir: Path):
    (project_dir / "logo.png").write_bytes(b"png")
    (project_dir / "archive.zip").write_bytes(b"zip")

    result = CliRunner().invoke(main, ["assets", "Media", "logo.png", "archive.zip"])

    assert result.exit_code == 0
    assert "Skipping: Unsupported file type archive.zip" in result.output
    contents = json.loads(
        (project_dir / "Media.xcassets" / "logo.imageset" / "Contents.json").read_text()
    )
    assert contents["images"][0]["filename"] == "logo.png"


def test_reset_prints_trash_paths(monkeypatch, cli_launcher, project_dir: Path):
    monkeypatch.setattr("xcopen.interface_state.getpass.getuser", lambda: "me")
    state = project_dir / "App.xcworkspace" / "xcuserdata" / "me.xcuserdatad"
    state.mkdir(parents=True)
    (state / "UserInterfaceState.xcuserstate").write_bytes(b"state")

    result = CliRunner().invoke(main, ["reset"])

    assert result.exit_code == 0
    assert str(cli_launcher.trash_dir / "UserInterfaceState.xcuserstate") in result.output


def test_launch_failure_reports_error(monkeypatch, cli_launcher, project_dir: Path):
    (project_dir / "App.xcodeproj").mkdir()

    def _fail(paths, *, background=False, application=None):
        raise LaunchError("open failed: boom")

    monkeypatch.setattr(cli_launcher, "launch", _fail)

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 1
    assert "Error: open failed: boom" in result.output


def test_filesystem_errors_are_reported(cli_launcher):
    result = CliRunner().invoke(main, ["new", "missing-dir/file.txt"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_help_lists_keywords():
    result = CliRunner().invoke(main, ["-h"])

    assert result.exit_code == 0
    assert "xcopen pkg|xpkg" in result.output
    assert "--focus" not in result.output


def test_version_flag():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "xcopen, version 0.1.0" in result.output
