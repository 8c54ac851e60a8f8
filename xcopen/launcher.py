"""Thin wrappers over the macOS tools xcopen drives.

All process spawning lives here so the rest of the package can be exercised
against a fake launcher.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .discovery import next_free_path
from .exceptions import LaunchError

OPEN = "/usr/bin/open"
OSASCRIPT = "/usr/bin/osascript"
XCRUN = "/usr/bin/xcrun"

ACTIVATE_XCODE_SCRIPT = 'tell application "Xcode" to activate'
QUIT_XCODE_SCRIPT = 'tell application "Xcode" to quit'


def _run(cmd: List[str]) -> subprocess.CompletedProcess:
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise LaunchError(f"Unable to run {cmd[0]}: {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit status {proc.returncode}"
        raise LaunchError(f"{Path(cmd[0]).name} failed: {detail}")
    return proc


def open_arguments(
    paths: Sequence[str],
    *,
    background: bool = False,
    application: Optional[str] = None,
) -> List[str]:
    """Assemble the argument list for ``/usr/bin/open``."""

    args = [OPEN]
    if background:
        args.append("-g")
    if application:
        args += ["-a", application]
    args += [str(path) for path in paths]
    return args


class Launcher(Protocol):
    """The operations xcopen needs from the operating system."""

    def launch(
        self,
        paths: Sequence[str],
        *,
        background: bool = False,
        application: Optional[str] = None,
    ) -> None: ...

    def open_in_text_editor(self, paths: Sequence[str]) -> None: ...

    def resolve_xcode_path(self) -> Path: ...

    def run_script(self, source: str) -> str: ...

    def activate_xcode(self) -> None: ...

    def quit_xcode(self) -> None: ...

    def trash(self, path: Path) -> Path: ...


class SystemLauncher:
    """Launch files and scripts through the real OS tools."""

    def __init__(self, trash_dir: Optional[Path] = None) -> None:
        self.trash_dir = trash_dir or Path.home() / ".Trash"
        self._xcode_path: Optional[Path] = None

    def launch(
        self,
        paths: Sequence[str],
        *,
        background: bool = False,
        application: Optional[str] = None,
    ) -> None:
        _run(open_arguments(paths, background=background, application=application))

    def open_in_text_editor(self, paths: Sequence[str]) -> None:
        _run([OPEN, "-e", *[str(path) for path in paths]])

    def resolve_xcode_path(self) -> Path:
        """Return the active Xcode.app, derived from ``xcode-select -p``."""

        if self._xcode_path is None:
            developer_dir = _run([XCRUN, "xcode-select", "-p"]).stdout.strip()
            if not developer_dir:
                raise LaunchError("xcode-select did not report a developer directory")
            # .../Xcode.app/Contents/Developer
            self._xcode_path = Path(developer_dir).parent.parent
        return self._xcode_path

    def run_script(self, source: str) -> str:
        return _run([OSASCRIPT, "-e", source]).stdout

    def activate_xcode(self) -> None:
        self.run_script(ACTIVATE_XCODE_SCRIPT)

    def quit_xcode(self) -> None:
        self.run_script(QUIT_XCODE_SCRIPT)

    def trash(self, path: Path) -> Path:
        """Move ``path`` into the user's trash and return where it landed."""

        self.trash_dir.mkdir(parents=True, exist_ok=True)
        target = next_free_path(self.trash_dir / path.name)
        shutil.move(str(path), str(target))
        return target


def escape_applescript_string(value: str) -> str:
    """Escape a value for use inside an AppleScript string literal."""

    return value.replace("\\", "\\\\").replace('"', '\\"')


def focus_script(file_name: str) -> str:
    """UI-automation script that reveals ``file_name`` in Xcode's navigator."""

    name = escape_applescript_string(file_name)
    return f"""tell application "System Events"
  tell process "Xcode"
    activate
    set frontmost to true
    click menu item "Open Quickly…" of menu "File" of menu bar 1
    key up option
    key up command
    keystroke "{name}"
    delay 0.5
    keystroke return
    delay 0.2
    click menu item "Move Focus to Editor…" of menu "Navigate" of menu bar 1
    delay 0.1
    keystroke return
    delay 0.1
    click menu item "Reveal in Project Navigator" of menu "Navigate" of menu bar 1
  end tell
end tell"""
