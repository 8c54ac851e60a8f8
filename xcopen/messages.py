"""Non-fatal notices collected while a command runs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProcessingMessage:
    """Informational or warning message shown to the user after a run."""

    level: str
    text: str


def info(text: str) -> ProcessingMessage:
    return ProcessingMessage(level="info", text=text)


def warning(text: str) -> ProcessingMessage:
    return ProcessingMessage(level="warning", text=text)
