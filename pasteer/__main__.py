"""Module entrypoint for running Pasteer as ``python -m pasteer``."""

from __future__ import annotations

from pasteer.cli import main


if __name__ == "__main__":
    main()
