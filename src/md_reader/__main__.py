"""Allow ``python -m md_reader`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m md_reader`` behaves identically to the ``md-reader``
console script.
"""

from __future__ import annotations

from md_reader.cli.app import cli

if __name__ == "__main__":
    cli()
