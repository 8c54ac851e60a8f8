from pathlib import Path

import pytest

from xcopen.exceptions import XcopenError
from xcopen.playground import (
    PlaygroundKind,
    create_playground,
    create_playground_workspace,
    resolve_kind,
)


@pytest.mark.parametrize(
    "token, kind",
    [
        ("mac", PlaygroundKind.MACOS),
        ("macOS", PlaygroundKind.MACOS),
        ("OSX", PlaygroundKind.MACOS),
        ("ios", PlaygroundKind.IOS),
        ("iOS", PlaygroundKind.IOS),
        ("tv", PlaygroundKind.TVOS),
        ("tvOS", PlaygroundKind.TVOS),
        ("watchos", PlaygroundKind.OTHER),
    ],
)
def test_kind_from_token(token, kind):
    assert PlaygroundKind.from_token(token) is kind


def test_resolve_kind_rejects_other():
    with pytest.raises(XcopenError, match="Unsupported playground type"):
        resolve_kind("bogus")


def test_other_kind_has_no_template():
    with pytest.raises(XcopenError):
        PlaygroundKind.OTHER.template_location


def test_template_locations_are_platform_specific():
    assert "/macOS/Playground/" in PlaygroundKind.MACOS.template_location
    assert "iPhoneOS.platform" in PlaygroundKind.IOS.template_location
    assert "AppleTVOS.platform" in PlaygroundKind.TVOS.template_location


def test_create_playground_copies_template(xcode_app, tmp_path: Path):
    destination = tmp_path / "Demo.playground"

    assert create_playground(PlaygroundKind.TVOS, destination, xcode_app) is True
    assert (destination / "Contents.swift").read_text() == "// tvOS\n"


def test_create_playground_leaves_existing_destination(xcode_app, tmp_path: Path):
    destination = tmp_path / "Demo.playground"
    destination.mkdir()
    (destination / "Contents.swift").write_text("mine")

    assert create_playground(PlaygroundKind.IOS, destination, xcode_app) is False
    assert (destination / "Contents.swift").read_text() == "mine"


def test_create_playground_missing_template(tmp_path: Path):
    with pytest.raises(XcopenError, match="template not found"):
        create_playground(PlaygroundKind.IOS, tmp_path / "x.playground", tmp_path / "Nope.app")


def test_workspace_manifest(tmp_path: Path):
    workspace = create_playground_workspace("Demo", tmp_path)

    assert workspace == tmp_path / "Demo.xcworkspace"
    assert (workspace / "contents.xcworkspacedata").read_text() == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<Workspace version = "1.0">\n'
        '<FileRef location = "container:Demo.playground">\n'
        "</FileRef>\n"
        "</Workspace>\n"
    )


def test_workspace_manifest_escapes_name(tmp_path: Path):
    workspace = create_playground_workspace('R&D "draft"', tmp_path)
    data = (workspace / "contents.xcworkspacedata").read_text()
    assert "container:R&amp;D &quot;draft&quot;.playground" in data


def test_workspace_manifest_is_write_once(tmp_path: Path):
    workspace = create_playground_workspace("Demo", tmp_path)
    manifest = workspace / "contents.xcworkspacedata"
    manifest.write_text("user edits")

    with pytest.raises(XcopenError, match="Workspace already exists"):
        create_playground_workspace("Demo", tmp_path)
    assert manifest.read_text() == "user edits"
