"""Console entry point for xcopen."""

from __future__ import annotations

import sys

from .cli import dispatch_cli


def main() -> None:
    """Run the Click CLI with the process arguments."""

    dispatch_cli(sys.argv[1:])


if __name__ == "__main__":
    main()
