"""Command-line entry point: philosophers, time to die, eat and sleep, optional meal count."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dining.config import ArgumentError, parse_args
from dining.simulation import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as err:
        print(err)
        return 1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())