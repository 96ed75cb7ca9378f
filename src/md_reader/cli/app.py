"""CLI application entry point and request routing for md-reader.

This module is the **sole error boundary** for the entire application.
It catches :class:`~md_reader.exceptions.MdReaderError`, ``KeyboardInterrupt``,
``BrokenPipeError`` and any unexpected ``Exception``, rendering user-friendly
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — resolution is delegated to ``core`` and
  file access to ``infra``.
* Document content and help go to stdout with plain ``print()`` so they
  are emitted verbatim; diagnostics go through the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from md_reader.cli import exit_codes
from md_reader.cli.console import console
from md_reader.cli.help import USAGE_POINTER, display_help
from md_reader.core.argument_resolver import resolve_arguments
from md_reader.core.models import ShowHelp
from md_reader.exceptions import ArgumentError, MdReaderError
from md_reader.infra.markdown_reader import read_markdown_file

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request handlers
# ---------------------------------------------------------------------------

def _handle_help() -> int:
    display_help()
    return exit_codes.SUCCESS


def _handle_read(path: str) -> int:
    """Print the markdown file at *path*; nothing is printed on failure."""
    content = read_markdown_file(path)
    print(content)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the md-reader CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    MdReaderError
        Any argument or file error; rendered by :func:`cli`.
    """
    if argv is None:
        argv = sys.argv[1:]

    request = resolve_arguments(argv)
    logger.debug("Resolved request: %r", request)

    if isinstance(request, ShowHelp):
        return _handle_help()

    return _handle_read(request.path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def report_error(exc: MdReaderError) -> None:
    """Render *exc* on stderr in the format matching its category.

    Argument errors are followed by a blank line and a pointer to
    ``--help``; file errors by their ``Hint:`` line.
    """
    console.print(str(exc), label="Error:", style="bold red")
    if isinstance(exc, ArgumentError):
        console.print()
        console.print(USAGE_POINTER)
        return
    if exc.hint:
        console.print(exc.hint, label="Hint:", style="yellow")


def _silence_stdout() -> None:
    """Point the stdout descriptor at ``os.devnull``.

    After a broken pipe the interpreter still flushes ``sys.stdout`` on
    exit, which would raise again.  Streams without a descriptor (test
    capture buffers) need no redirect.
    """
    try:
        fileno = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fileno)
    os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MdReaderError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print()
        console.print(label="Aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            label="Unexpected error.",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
