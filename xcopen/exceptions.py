"""Errors raised by xcopen."""

from __future__ import annotations


class XcopenError(RuntimeError):
    """A failure that aborts the current invocation."""


class LaunchError(XcopenError):
    """An external tool (open, osascript, xcrun) failed or could not be run."""
