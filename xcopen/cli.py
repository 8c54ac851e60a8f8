"""Command-line interface for xcopen."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import click

from . import __version__
from .dispatcher import DispatchResult, Invocation, run_invocation
from .exceptions import XcopenError
from .launcher import SystemLauncher

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

USAGE_DISCUSSION = """
\b
xcopen <files>...        Open files in Xcode.
xcopen docs              Open .md and .txt files.
xcopen new <files>...    Create new files (if they don't exist), open in Xcode.
xcopen xc|ws|pg(w)       Open xcodeproj, workspace, or playground.
                           * Add ios|mac|tvos [name] to create a playground.
                           * Add w (pgw) to create playground in workspace.
xcopen pkg|xpkg          Open Package.swift in TextEdit or Xcode.
xcopen assets [dest] [images]...
                         Build an asset catalog with one image set per image.
xcopen reset             Quit Xcode and trash saved interface state.
"""


@click.command(
    name="xcopen",
    context_settings=CONTEXT_SETTINGS,
    epilog=USAGE_DISCUSSION,
)
@click.argument("paths", nargs=-1)
@click.option(
    "-b",
    "-g",
    "--background",
    is_flag=True,
    help="Open Xcode in the background.",
)
@click.option(
    "-a",
    "--all",
    "include_manifest",
    is_flag=True,
    help="Also open Package.swift when searching for projects.",
)
@click.option(
    "-d",
    "--docs",
    "docs_only",
    is_flag=True,
    help="Restrict to documentation (.md, .txt) files.",
)
@click.option(
    "-n",
    "--new",
    "create_new",
    is_flag=True,
    help="Create the named files if missing, then open them in Xcode.",
)
@click.option("-f", "--focus", is_flag=True, hidden=True)
@click.option(
    "-e",
    "--folder",
    "enclose_in_folder",
    is_flag=True,
    help="Enclose new playgrounds in a folder.",
)
@click.option(
    "--open/--no-open",
    "open_after_creating",
    default=True,
    show_default=True,
    help="Open newly created playgrounds/workspaces.",
)
@click.version_option(__version__, prog_name="xcopen")
def main(
    paths: Tuple[str, ...],
    background: bool,
    include_manifest: bool,
    docs_only: bool,
    create_new: bool,
    focus: bool,
    enclose_in_folder: bool,
    open_after_creating: bool,
) -> None:
    """Open files in Xcode.

    With no arguments, opens any xcworkspace in the working directory or,
    if none is found, its xcodeproj and playground files.
    """

    invocation = Invocation(
        paths=paths,
        background=background,
        include_manifest=include_manifest,
        docs_only=docs_only,
        create_new=create_new,
        focus=focus,
        enclose_in_folder=enclose_in_folder,
        open_after_creating=open_after_creating,
    )
    try:
        result = run_invocation(invocation, SystemLauncher(), Path.cwd())
    except (XcopenError, OSError) as exc:
        _bail(str(exc))
    else:
        _report(result)


def dispatch_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    main.main(args=args, prog_name="xcopen")


# Helper utilities ---------------------------------------------------------------------------


def _report(result: DispatchResult) -> None:
    for message in result.messages:
        color = "yellow" if message.level == "warning" else "blue"
        click.echo(click.style(message.text, fg=color))
    for path in result.trashed:
        click.echo(str(path))


def _bail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    dispatch_cli()
