"""Module entrypoint for running segmark as ``python -m segmark``."""

from __future__ import annotations

from segmark.cli import main


if __name__ == "__main__":
    main()
