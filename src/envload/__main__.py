# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envload CLI (run via ``envload`` or ``python -m envload``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envload.cli import cli
    except ImportError:
        sys.stderr.write("envload CLI dependencies missing. Install with: pip install envload\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
