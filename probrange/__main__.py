"""CLI entry point for probrange package.

Allows running via: python -m probrange
"""

from __future__ import annotations

from probrange.cli.main import cli

if __name__ == "__main__":
    cli()
