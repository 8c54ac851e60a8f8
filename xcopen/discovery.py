"""Locate and classify Xcode artifacts on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

WORKSPACE_SUFFIX = ".xcworkspace"
PROJECT_SUFFIX = ".xcodeproj"
PLAYGROUND_SUFFIX = ".playground"
MANIFEST_NAME = "Package.swift"
DOC_SUFFIXES = (".txt", ".md")
CONTAINER_EXTENSIONS = ("xcodeproj", "xcworkspace", "playground")


@dataclass(frozen=True)
class PathClassification:
    """Disjoint split of user-supplied paths."""

    containers: Tuple[str, ...] = ()
    directories: Tuple[str, ...] = ()
    flat: Tuple[str, ...] = ()


def trimmed_dir_path(path: str) -> str:
    """Drop a single trailing slash from a folder path."""

    if path.endswith("/") and len(path) > 1:
        return path[:-1]
    return path


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """Split items into (matching, not matching), keeping relative order."""

    matching: List[T] = []
    not_matching: List[T] = []
    for item in items:
        if predicate(item):
            matching.append(item)
        else:
            not_matching.append(item)
    return matching, not_matching


def is_container(path: str) -> bool:
    trimmed = trimmed_dir_path(path)
    return any(trimmed.endswith(ext) for ext in CONTAINER_EXTENSIONS)


def classify_paths(paths: Sequence[str], root: Path) -> PathClassification:
    """Partition paths into project containers, directories, and flat files."""

    containers, remaining = partition(paths, is_container)
    directories, flat = partition(remaining, lambda path: (root / path).is_dir())
    return PathClassification(
        containers=tuple(containers),
        directories=tuple(directories),
        flat=tuple(flat),
    )


def files_with_suffixes(directory: Path, suffixes: Sequence[str]) -> List[Path]:
    """Return entries of ``directory`` whose names end with any of ``suffixes``.

    A suffix may be an extension (``.md``), a longer ending, or a whole file
    name such as ``Package.swift``. Results are sorted by name.
    """

    entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    return [entry for entry in entries if any(entry.name.endswith(s) for s in suffixes)]


def has_workspace(directory: Path) -> bool:
    return bool(files_with_suffixes(directory, (WORKSPACE_SUFFIX,)))


def is_documentation(path: str) -> bool:
    return path.lower().endswith(DOC_SUFFIXES)


def next_free_path(candidate: Path) -> Path:
    """Return ``candidate`` or the first unused ``NAME N.ext`` sibling, N >= 2."""

    if not candidate.exists():
        return candidate
    counter = 2
    while True:
        numbered = candidate.with_name(f"{candidate.stem} {counter}{candidate.suffix}")
        if not numbered.exists():
            return numbered
        counter += 1


def next_free_name(directory: Path, name: str, suffixes: Sequence[str]) -> str:
    """Return ``name`` or ``name N`` such that no ``<name><suffix>`` exists."""

    candidate = name
    counter = 2
    while any((directory / f"{candidate}{suffix}").exists() for suffix in suffixes):
        candidate = f"{name} {counter}"
        counter += 1
    return candidate
