"""xcopen - open and scaffold Xcode projects from the command line."""

from .asset_catalog import build_assets
from .commands import Command, Keyword, parse_command
from .discovery import PathClassification, classify_paths, files_with_suffixes
from .dispatcher import CommandDispatcher, DispatchResult, Invocation
from .exceptions import LaunchError, XcopenError
from .interface_state import reset_interface_state
from .launcher import Launcher, SystemLauncher
from .messages import ProcessingMessage
from .playground import PlaygroundKind, create_playground, create_playground_workspace

__version__ = "0.1.0"
__all__ = [
    "build_assets",
    "Command",
    "Keyword",
    "parse_command",
    "PathClassification",
    "classify_paths",
    "files_with_suffixes",
    "CommandDispatcher",
    "DispatchResult",
    "Invocation",
    "ProcessingMessage",
    "LaunchError",
    "XcopenError",
    "reset_interface_state",
    "Launcher",
    "SystemLauncher",
    "PlaygroundKind",
    "create_playground",
    "create_playground_workspace",
]
