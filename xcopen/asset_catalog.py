"""Build Xcode asset catalogs and image sets."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .exceptions import XcopenError
from .messages import ProcessingMessage, info, warning

DEFAULT_CATALOG_NAME = "Media"
CATALOG_EXTENSION = ".xcassets"
IMAGESET_EXTENSION = ".imageset"
CONTENTS_NAME = "Contents.json"
SUPPORTED_IMAGE_EXTENSIONS = ("avci", "heic", "heif", "jpeg", "jpg", "pdf", "png", "svg")
AUTHOR = "xcopen"


def catalog_contents() -> Dict[str, Any]:
    return {"info": {"author": AUTHOR, "version": 1}}


def imageset_contents(filename: str) -> Dict[str, Any]:
    """Single universal image with vector preservation enabled."""

    return {
        "images": [{"filename": filename, "idiom": "universal"}],
        "info": {"author": AUTHOR, "version": 1},
        "properties": {"preserves-vector-representation": True},
    }


def _write_contents(folder: Path, payload: Dict[str, Any]) -> None:
    (folder / CONTENTS_NAME).write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n")


def build_asset_catalog(base_dir: Path, name: str = DEFAULT_CATALOG_NAME) -> Path:
    """Create (or reuse) ``<base_dir>/<name>.xcassets`` and write its Contents.json."""

    catalog = base_dir / f"{name}{CATALOG_EXTENSION}"
    if not catalog.exists():
        catalog.mkdir(parents=True)
    elif not catalog.is_dir():
        raise XcopenError(f"Destination must be a directory: {catalog}")
    _write_contents(catalog, catalog_contents())
    return catalog


def build_image_set(source: Path, catalog: Path) -> Optional[ProcessingMessage]:
    """Copy ``source`` into its own image set. Returns a notice when skipped."""

    if not source.exists():
        return warning(f"Skipping: {source.name} does not exist")

    extension = source.suffix[1:].lower()
    if extension not in SUPPORTED_IMAGE_EXTENSIONS:
        return warning(f"Skipping: Unsupported file type {source.name}")

    imageset = catalog / f"{source.stem}{IMAGESET_EXTENSION}"
    imageset.mkdir(parents=True, exist_ok=True)

    target = imageset / source.name
    if target.exists():
        target.unlink()
    shutil.copy2(source, target)

    _write_contents(imageset, imageset_contents(source.name))
    return None


def build_assets(root: Path, arguments: Sequence[str]) -> Tuple[Path, List[ProcessingMessage]]:
    """Build a catalog from ``[destination, image...]`` relative to ``root``.

    Without arguments ``Media.xcassets`` is built in ``root``. A destination
    that is an existing directory receives ``Media.xcassets``; any other
    destination (including an existing ``.xcassets`` folder) names the
    catalog by its stem.
    """

    messages: List[ProcessingMessage] = []
    if not arguments:
        return build_asset_catalog(root), messages

    destination = root / arguments[0]
    name = DEFAULT_CATALOG_NAME
    base_dir = destination
    if destination.suffix == CATALOG_EXTENSION or not destination.is_dir():
        name = destination.stem
        base_dir = destination.parent
        if not base_dir.exists():
            messages.append(info(f"Creating destination directory {base_dir}"))
            base_dir.mkdir(parents=True)

    catalog = build_asset_catalog(base_dir, name)

    for raw in arguments[1:]:
        notice = build_image_set(root / raw, catalog)
        if notice is not None:
            messages.append(notice)

    return catalog, messages
