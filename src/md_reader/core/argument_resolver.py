"""Argument resolution — turn the invocation arguments into a request.

Pure: no filesystem access, no output.  Only the first argument is
inspected; anything after it is ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from md_reader.core.models import ParsedRequest, ReadPath, ShowHelp
from md_reader.core.path_validator import is_blank, is_valid_path
from md_reader.exceptions import (
    EmptyPathError,
    InvalidPathArgumentError,
    NoArgumentsError,
    UnknownFlagError,
)
from md_reader.utils.constants import HELP_FLAGS


def resolve_arguments(argv: Sequence[str]) -> ParsedRequest:
    """Resolve *argv* (program name excluded) into a :data:`ParsedRequest`.

    Rules, in order:

    1. No arguments → :class:`NoArgumentsError`.
    2. ``-h`` / ``--help`` → :class:`ShowHelp` (remaining arguments ignored).
    3. Any other ``-``-prefixed argument → :class:`UnknownFlagError`.
    4. Empty or whitespace-only → :class:`EmptyPathError`.
    5. Fails :func:`is_valid_path` → :class:`InvalidPathArgumentError`.
    6. Otherwise → :class:`ReadPath`.

    Raises
    ------
    ArgumentError
        One of the subclasses listed above.
    """
    if not argv:
        raise NoArgumentsError()

    first = argv[0]

    if first in HELP_FLAGS:
        return ShowHelp()
    if first.startswith("-"):
        raise UnknownFlagError(first)
    if is_blank(first):
        raise EmptyPathError()
    if not is_valid_path(first):
        raise InvalidPathArgumentError(first)

    return ReadPath(path=first)
