from __future__ import annotations
import sys
from envedit.cli import run_cli


def main() -> int:
    """Entrypoint for the `envedit` console script and `python -m envedit`."""
    return run_cli(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
