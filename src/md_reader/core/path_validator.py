"""Syntactic path validation.

This is a filter on the *string* only: it never touches the
filesystem, never resolves ``.``/``..`` and treats relative, absolute
and dotted paths alike.  Existence, type and extension are checked
later by :mod:`md_reader.infra.markdown_reader`.
"""

from __future__ import annotations

from md_reader.utils.constants import INFORMATION_SEPARATORS, INVALID_PATH_CHARS


def is_blank(value: str) -> bool:
    """Return ``True`` when *value* is empty or only Unicode ``White_Space``.

    Unlike ``str.strip()``, the ASCII information separators
    ``\\x1c``-``\\x1f`` are not treated as whitespace.
    """
    return all(
        char.isspace() and char not in INFORMATION_SEPARATORS for char in value
    )


def is_valid_path(path: str) -> bool:
    """Return ``True`` when *path* is usable as a file path argument.

    A path is rejected when it is empty, whitespace-only, or contains any
    of NUL ``< > : " | ? *``.

    Examples
    --------
    >>> is_valid_path("docs/guide.md")
    True
    >>> is_valid_path("notes?.md")
    False
    """
    if is_blank(path):
        return False
    return not any(char in INVALID_PATH_CHARS for char in path)
