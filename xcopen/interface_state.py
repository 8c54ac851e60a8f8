"""Reset Xcode's saved per-user window and navigator state."""

from __future__ import annotations

import getpass
from pathlib import Path
from typing import List, Optional

from .discovery import PROJECT_SUFFIX, WORKSPACE_SUFFIX, files_with_suffixes
from .launcher import Launcher

STATE_FILE_NAME = "UserInterfaceState.xcuserstate"


def interface_state_path(container: Path, user: str) -> Path:
    """Location of ``user``'s UI state file inside a project or workspace."""

    workspace = container
    if container.name.endswith(PROJECT_SUFFIX):
        workspace = container / "project.xcworkspace"
    return workspace / "xcuserdata" / f"{user}.xcuserdatad" / STATE_FILE_NAME


def reset_interface_state(
    root: Path, launcher: Launcher, user: Optional[str] = None
) -> List[Path]:
    """Quit Xcode and trash the UI state of every container in ``root``.

    Returns the trash locations of the moved files.
    """

    launcher.quit_xcode()
    user = user or getpass.getuser()
    trashed: List[Path] = []
    for container in files_with_suffixes(root, (PROJECT_SUFFIX, WORKSPACE_SUFFIX)):
        state = interface_state_path(container, user)
        if not state.exists():
            continue
        trashed.append(launcher.trash(state))
    return trashed
