"""Decode raw positional tokens into a single command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .exceptions import XcopenError


class Keyword(Enum):
    WORKSPACE = "ws"
    PROJECT = "xc"
    PLAYGROUND = "pg"
    PLAYGROUND_WORKSPACE = "pgw"
    DOCS = "docs"
    PACKAGE = "pkg"
    PACKAGE_IN_XCODE = "xpkg"
    NEW = "new"
    ASSETS = "assets"
    RESET = "reset"


# Keywords that only apply when they are the sole token.
SOLO_KEYWORDS = {
    "ws": Keyword.WORKSPACE,
    "xc": Keyword.PROJECT,
    "pg": Keyword.PLAYGROUND,
    "docs": Keyword.DOCS,
    "pkg": Keyword.PACKAGE,
    "xpkg": Keyword.PACKAGE_IN_XCODE,
    "reset": Keyword.RESET,
}
ASSET_TOKENS = ("assets", "asset")
PLAYGROUND_TYPES_HINT = "(mac, ios, tvos)"


@dataclass(frozen=True)
class Command:
    """A decoded invocation. ``keyword`` is None for plain path arguments."""

    keyword: Optional[Keyword] = None
    arguments: Tuple[str, ...] = ()

    @property
    def creates_playground(self) -> bool:
        return self.keyword in (Keyword.PLAYGROUND, Keyword.PLAYGROUND_WORKSPACE) and bool(
            self.arguments
        )


def parse_command(paths: Sequence[str]) -> Command:
    """Map positional tokens onto a ``Command``.

    Raises ``XcopenError`` when a keyword is missing its required arguments.
    """

    if not paths:
        return Command()

    head = paths[0].lower()
    rest = tuple(paths[1:])

    if head == Keyword.NEW.value:
        if not rest:
            raise XcopenError("No new files to create.")
        return Command(Keyword.NEW, rest)

    if head in (Keyword.PLAYGROUND.value, Keyword.PLAYGROUND_WORKSPACE.value):
        keyword = Keyword(head)
        if not rest:
            if keyword is Keyword.PLAYGROUND_WORKSPACE:
                raise XcopenError(f"Must specify playground type {PLAYGROUND_TYPES_HINT}.")
            return Command(keyword)
        if len(rest) > 2:
            raise XcopenError(f"Usage: xcopen {head} <type> [name]")
        return Command(keyword, rest)

    if head in ASSET_TOKENS:
        return Command(Keyword.ASSETS, rest)

    if len(paths) == 1 and head in SOLO_KEYWORDS:
        return Command(SOLO_KEYWORDS[head])

    return Command(None, tuple(paths))
