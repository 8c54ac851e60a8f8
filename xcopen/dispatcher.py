"""Turn a parsed invocation into exactly one terminal action."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .asset_catalog import build_assets
from .commands import Command, Keyword, parse_command
from .discovery import (
    DOC_SUFFIXES,
    MANIFEST_NAME,
    PLAYGROUND_SUFFIX,
    PROJECT_SUFFIX,
    WORKSPACE_SUFFIX,
    classify_paths,
    files_with_suffixes,
    has_workspace,
    is_documentation,
    next_free_name,
    next_free_path,
    trimmed_dir_path,
)
from .exceptions import XcopenError
from .interface_state import reset_interface_state
from .launcher import Launcher, focus_script
from .messages import ProcessingMessage, warning
from .playground import create_playground, create_playground_workspace, resolve_kind


@dataclass(frozen=True)
class Invocation:
    """Positional arguments plus flags for a single run."""

    paths: Tuple[str, ...] = ()
    background: bool = False
    include_manifest: bool = False
    docs_only: bool = False
    create_new: bool = False
    focus: bool = False
    enclose_in_folder: bool = False
    open_after_creating: bool = True


@dataclass
class DispatchResult:
    """What a run did, for reporting by the caller."""

    messages: List[ProcessingMessage] = field(default_factory=list)
    opened: List[str] = field(default_factory=list)
    created: List[Path] = field(default_factory=list)
    trashed: List[Path] = field(default_factory=list)


class CommandDispatcher:
    """Execute invocations relative to an explicit root directory."""

    def __init__(self, launcher: Launcher, root: Path) -> None:
        self.launcher = launcher
        self.root = root

    def run(self, invocation: Invocation) -> DispatchResult:
        result = DispatchResult()

        if invocation.create_new:
            if not invocation.paths:
                raise XcopenError("No new files to create.")
            self._create_and_open(invocation.paths, invocation, result)
            return result

        command = parse_command(invocation.paths)
        self._dispatch(command, invocation, result)
        return result

    def _dispatch(self, command: Command, invocation: Invocation, result: DispatchResult) -> None:
        keyword = command.keyword
        bg = invocation.background

        if keyword is None and not command.arguments:
            self._open_known_types(self.root, invocation, result)
        elif keyword is None:
            self._open_paths(command.arguments, invocation, result)
        elif keyword is Keyword.WORKSPACE:
            self._search_and_open(self.root, (WORKSPACE_SUFFIX,), bg, result)
        elif keyword is Keyword.PROJECT:
            self._search_and_open(self.root, (PROJECT_SUFFIX,), bg, result)
        elif keyword is Keyword.DOCS:
            self._search_and_open_in_xcode(self.root, DOC_SUFFIXES, bg, result)
        elif keyword is Keyword.PACKAGE:
            target = str(self.root / MANIFEST_NAME)
            self.launcher.open_in_text_editor([target])
            result.opened.append(target)
        elif keyword is Keyword.PACKAGE_IN_XCODE:
            self._search_and_open_in_xcode(self.root, (MANIFEST_NAME,), bg, result)
        elif keyword is Keyword.NEW:
            self._create_and_open(command.arguments, invocation, result)
        elif keyword in (Keyword.PLAYGROUND, Keyword.PLAYGROUND_WORKSPACE):
            if command.creates_playground:
                self._build_playground(command, invocation, result)
            else:
                self._search_and_open(self.root, (PLAYGROUND_SUFFIX,), bg, result)
        elif keyword is Keyword.ASSETS:
            catalog, messages = build_assets(self.root, command.arguments)
            result.created.append(catalog)
            result.messages.extend(messages)
        elif keyword is Keyword.RESET:
            result.trashed.extend(reset_interface_state(self.root, self.launcher))

    # Opening -----------------------------------------------------------------------------

    def _open_known_types(
        self, directory: Path, invocation: Invocation, result: DispatchResult
    ) -> None:
        """Open workspaces if any exist, otherwise projects and playgrounds."""

        bg = invocation.background
        if invocation.docs_only:
            self._search_and_open_in_xcode(directory, DOC_SUFFIXES, bg, result)
            return
        if has_workspace(directory):
            self._search_and_open(directory, (WORKSPACE_SUFFIX,), bg, result)
            return
        suffixes: Tuple[str, ...] = (PROJECT_SUFFIX, PLAYGROUND_SUFFIX)
        if invocation.include_manifest:
            suffixes += (MANIFEST_NAME,)
        self._search_and_open(directory, suffixes, bg, result)

    def _open_paths(
        self, paths: Sequence[str], invocation: Invocation, result: DispatchResult
    ) -> None:
        bg = invocation.background
        classification = classify_paths(paths, self.root)

        if classification.containers:
            found: List[Path] = []
            for raw in classification.containers:
                relative = Path(trimmed_dir_path(raw))
                parent = self.root / relative.parent
                if not parent.is_dir():
                    result.messages.append(warning(f"Skipping: {parent} is not a directory"))
                    continue
                found.extend(files_with_suffixes(parent, (relative.name,)))
            self._open(found, bg, result)

        flat = list(classification.flat)
        if invocation.docs_only:
            skipped = [path for path in flat if not is_documentation(path)]
            for path in skipped:
                result.messages.append(warning(f"Skipping: {path} is not a documentation file"))
            flat = [path for path in flat if is_documentation(path)]
        if flat:
            self._open_in_xcode([self.root / path for path in flat], bg, result)
            if invocation.focus:
                self._focus(flat)

        for raw in classification.directories:
            self._open_known_types(self.root / raw, invocation, result)

    def _search_and_open(
        self, directory: Path, suffixes: Sequence[str], bg: bool, result: DispatchResult
    ) -> None:
        self._open(files_with_suffixes(directory, suffixes), bg, result)

    def _search_and_open_in_xcode(
        self, directory: Path, suffixes: Sequence[str], bg: bool, result: DispatchResult
    ) -> None:
        self._open_in_xcode(files_with_suffixes(directory, suffixes), bg, result)

    def _open(self, paths: Sequence[Path], bg: bool, result: DispatchResult) -> None:
        if not paths:
            return
        targets = [str(path) for path in paths]
        self.launcher.launch(targets, background=bg)
        result.opened.extend(targets)
        if not bg:
            self.launcher.activate_xcode()

    def _open_in_xcode(
        self, paths: Sequence[Path], bg: bool, result: DispatchResult, *, activate: bool = True
    ) -> None:
        if not paths:
            return
        targets = [str(path) for path in paths]
        xcode = str(self.launcher.resolve_xcode_path())
        self.launcher.launch(targets, background=bg, application=xcode)
        result.opened.extend(targets)
        if activate and not bg:
            self.launcher.activate_xcode()

    def _focus(self, flat: Sequence[str]) -> None:
        for raw in flat:
            path = self.root / raw
            if path.exists():
                self.launcher.run_script(focus_script(path.name))
                return

    # Creating ----------------------------------------------------------------------------

    def _create_and_open(
        self, names: Sequence[str], invocation: Invocation, result: DispatchResult
    ) -> None:
        """Create missing files empty, then open every requested file in Xcode."""

        paths = [self.root / name for name in names]
        for path in paths:
            if not path.exists():
                path.touch()
                result.created.append(path)
        self._open_in_xcode(paths, invocation.background, result, activate=False)

    def _build_playground(
        self, command: Command, invocation: Invocation, result: DispatchResult
    ) -> None:
        kind = resolve_kind(command.arguments[0])
        name = command.arguments[1] if len(command.arguments) > 1 else kind.value
        xcode = self.launcher.resolve_xcode_path()

        destination_dir = self.root
        if invocation.enclose_in_folder:
            destination_dir = next_free_path(self.root / f"{kind.value} Playground")
            destination_dir.mkdir(parents=True)
            result.created.append(destination_dir)
            playground = destination_dir / f"{name}{PLAYGROUND_SUFFIX}"
        else:
            suffixes: Tuple[str, ...] = (PLAYGROUND_SUFFIX,)
            if command.keyword is Keyword.PLAYGROUND_WORKSPACE:
                suffixes += (WORKSPACE_SUFFIX,)
            core_name = next_free_name(self.root, name, suffixes)
            playground = self.root / f"{core_name}{PLAYGROUND_SUFFIX}"

        if create_playground(kind, playground, xcode):
            result.created.append(playground)

        bg = invocation.background
        if command.keyword is Keyword.PLAYGROUND_WORKSPACE:
            workspace = create_playground_workspace(playground.stem, destination_dir)
            result.created.append(workspace)
            if invocation.open_after_creating:
                self.launcher.launch([str(workspace)], background=bg)
                result.opened.append(str(workspace))
        elif invocation.open_after_creating:
            self._open_in_xcode([playground], bg, result)


def run_invocation(
    invocation: Invocation, launcher: Launcher, root: Optional[Path] = None
) -> DispatchResult:
    """Convenience wrapper that dispatches relative to ``root`` (default: cwd)."""

    return CommandDispatcher(launcher, root or Path.cwd()).run(invocation)
