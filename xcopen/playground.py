"""Create blank playgrounds from the active Xcode's templates."""

from __future__ import annotations

import shutil
from enum import Enum
from pathlib import Path
from xml.sax.saxutils import escape

from .exceptions import XcopenError

_TEMPLATE_TAIL = "Playground/Blank.xctemplate/___FILEBASENAME___.playground"

WORKSPACE_DATA_NAME = "contents.xcworkspacedata"
WORKSPACE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<Workspace version = "1.0">
<FileRef location = "container:{core_name}.playground">
</FileRef>
</Workspace>
"""


class PlaygroundKind(Enum):
    MACOS = "macOS"
    IOS = "iOS"
    TVOS = "tvOS"
    OTHER = "other"

    @classmethod
    def from_token(cls, token: str) -> "PlaygroundKind":
        return _KIND_SYNONYMS.get(token.lower(), cls.OTHER)

    @property
    def template_location(self) -> str:
        """Template path relative to the Xcode.app bundle."""

        if self is PlaygroundKind.MACOS:
            return (
                "Contents/Developer/Library/Xcode/Templates/File Templates/macOS/"
                + _TEMPLATE_TAIL
            )
        if self is PlaygroundKind.IOS:
            return (
                "Contents/Developer/Platforms/iPhoneOS.platform/Developer/Library/Xcode/"
                "Templates/File Templates/iOS/" + _TEMPLATE_TAIL
            )
        if self is PlaygroundKind.TVOS:
            return (
                "Contents/Developer/Platforms/AppleTVOS.platform/Developer/Library/Xcode/"
                "Templates/File Templates/tvOS/" + _TEMPLATE_TAIL
            )
        raise XcopenError("Unsupported playground type (mac, ios, tvos).")


_KIND_SYNONYMS = {
    "mac": PlaygroundKind.MACOS,
    "macos": PlaygroundKind.MACOS,
    "osx": PlaygroundKind.MACOS,
    "ios": PlaygroundKind.IOS,
    "tv": PlaygroundKind.TVOS,
    "tvos": PlaygroundKind.TVOS,
}


def resolve_kind(token: str) -> PlaygroundKind:
    kind = PlaygroundKind.from_token(token)
    if kind is PlaygroundKind.OTHER:
        raise XcopenError("Unsupported playground type (mac, ios, tvos).")
    return kind


def create_playground(kind: PlaygroundKind, destination: Path, xcode_path: Path) -> bool:
    """Copy the blank template for ``kind`` to ``destination``.

    Returns False without touching anything when the destination exists.
    """

    source = xcode_path / kind.template_location
    if destination.exists():
        return False
    if not source.exists():
        raise XcopenError(f"Playground template not found: {source}")
    shutil.copytree(source, destination)
    return True


def create_playground_workspace(core_name: str, directory: Path) -> Path:
    """Write ``<core_name>.xcworkspace`` referencing the sibling playground.

    Refuses to touch a workspace that already exists.
    """

    workspace = directory / f"{core_name}.xcworkspace"
    if workspace.exists():
        raise XcopenError(f"Workspace already exists: {workspace}")
    workspace.mkdir(parents=True)
    (workspace / WORKSPACE_DATA_NAME).write_text(
        WORKSPACE_TEMPLATE.format(core_name=escape(core_name, {'"': "&quot;"})), encoding="utf-8"
    )
    return workspace
