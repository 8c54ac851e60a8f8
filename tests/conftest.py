"""Shared pytest fixtures."""

from pathlib import Path
import shutil

import pytest


class FakeLauncher:
    """Records launcher calls instead of spawning processes."""

    def __init__(self, xcode_path: Path, trash_dir: Path):
        self.xcode_path = xcode_path
        self.trash_dir = trash_dir
        self.calls = []

    def launch(self, paths, *, background=False, application=None):
        self.calls.append(("launch", list(paths), background, application))

    def open_in_text_editor(self, paths):
        self.calls.append(("text_editor", list(paths)))

    def resolve_xcode_path(self):
        return self.xcode_path

    def run_script(self, source):
        self.calls.append(("script", source))
        return ""

    def activate_xcode(self):
        self.calls.append(("activate",))

    def quit_xcode(self):
        self.calls.append(("quit",))

    def trash(self, path):
        self.trash_dir.mkdir(parents=True, exist_ok=True)
        target = self.trash_dir / path.name
        shutil.move(str(path), str(target))
        self.calls.append(("trash", path))
        return target

    def launches(self):
        return [call for call in self.calls if call[0] == "launch"]

    def opened(self):
        return [path for call in self.launches() for path in call[1]]


@pytest.fixture
def xcode_app(tmp_path):
    """A fake Xcode.app bundle carrying the blank playground templates."""

    from xcopen.playground import PlaygroundKind

    app = tmp_path / "Applications" / "Xcode.app"
    for kind in (PlaygroundKind.MACOS, PlaygroundKind.IOS, PlaygroundKind.TVOS):
        template = app / kind.template_location
        template.mkdir(parents=True)
        (template / "Contents.swift").write_text(f"// {kind.value}\n")
        (template / "contents.xcplayground").write_text(
            f"<playground target-platform='{kind.value.lower()}'/>\n"
        )
    return app


@pytest.fixture
def project_dir(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def launcher(xcode_app, tmp_path):
    return FakeLauncher(xcode_app, tmp_path / "Trash")


@pytest.fixture
def cli_launcher(monkeypatch, launcher, project_dir):
    """Route the CLI through the fake launcher with ``project_dir`` as cwd."""

    monkeypatch.setattr("xcopen.cli.SystemLauncher", lambda: launcher)
    monkeypatch.chdir(project_dir)
    return launcher
