"""
Module entrypoint for the splitdesk CLI.

This file exists so that `python -m splitdesk ...` works when the console-script
wrapper is not installed.
"""

from __future__ import annotations

from splitdesk.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
