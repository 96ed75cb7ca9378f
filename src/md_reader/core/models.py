"""Request models for md-reader.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A :data:`ParsedRequest` is produced by the
argument resolver and consumed immediately by the CLI layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShowHelp:
    """The user asked for the help text (``-h`` / ``--help``)."""


@dataclass(frozen=True, slots=True)
class ReadPath:
    """The user asked to print one markdown file.

    The path has already passed :func:`~md_reader.core.path_validator.is_valid_path`
    and is never re-checked syntactically downstream.
    """

    path: str
    """Path exactly as given on the command line."""


ParsedRequest = ShowHelp | ReadPath
"""Closed set of outcomes of a successful argument resolution."""
