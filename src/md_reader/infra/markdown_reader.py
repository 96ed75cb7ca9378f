"""Infrastructure: validate a markdown file on disk and read it.

Checks run strictly in order and the first failure wins:

1. the path exists                 → :class:`MarkdownNotFoundError`
2. it is a regular file            → :class:`NotAFileError`
3. it has a markdown extension     → :class:`InvalidExtensionError`
4. it opens, reads and decodes     → :class:`ReadError`
5. it fits within ``MAX_FILE_SIZE`` → :class:`FileTooLargeError`

Rules
-----
* Type is checked with :func:`os.stat` *before* opening, so FIFOs and
  devices are rejected without blocking on ``open()``.
* Size is taken from :func:`os.fstat` on the open handle and the read is
  capped at ``MAX_FILE_SIZE + 1`` bytes, so an oversized file is never
  loaded in full.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import PurePath

from md_reader.exceptions import (
    FileTooLargeError,
    InvalidExtensionError,
    InvalidPathError,
    MarkdownIOError,
    MarkdownNotFoundError,
    NotAFileError,
    ReadError,
)
from md_reader.utils.constants import MARKDOWN_EXTENSIONS, MAX_FILE_SIZE, NO_EXTENSION

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Extension helpers (pure)
# ---------------------------------------------------------------------------

def file_extension(path: str | os.PathLike[str]) -> str | None:
    """Return the extension of the final path component, without the dot.

    ``None`` when the name has no dot, or only a leading one (``.md`` is a
    hidden file, not an extension).  ``"notes."`` yields ``""``.
    """
    name = PurePath(path).name
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def is_markdown_file(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` when *path* ends in ``.md`` or ``.markdown`` (any case)."""
    extension = file_extension(path)
    if extension is None:
        return False
    return extension.lower() in MARKDOWN_EXTENSIONS


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

def read_markdown_file(path: str) -> str:
    """Validate *path* and return the file's full text, exactly as stored.

    The content is decoded as strict UTF-8 with no newline translation.

    Raises
    ------
    MarkdownNotFoundError
        Nothing exists at *path*.
    NotAFileError
        *path* is a directory or another non-regular entry.
    InvalidExtensionError
        The extension is not ``md`` / ``markdown``.
    ReadError
        Opening, reading or UTF-8 decoding failed.
    FileTooLargeError
        The file holds more than ``MAX_FILE_SIZE`` bytes.
    InvalidPathError
        *path* cannot be passed to the OS at all (e.g. an embedded NUL).
    MarkdownIOError
        Any other failure while inspecting the path.
    """
    info = _stat(path)
    if not stat.S_ISREG(info.st_mode):
        raise NotAFileError(path)

    if not is_markdown_file(path):
        extension = file_extension(path)
        raise InvalidExtensionError(
            path,
            extension if extension is not None else NO_EXTENSION,
        )

    logger.debug("Checks passed for %s (%d bytes on disk)", path, info.st_size)
    data = _read_bounded(path)
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadError(path, exc) from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return content


def _stat(path: str) -> os.stat_result:
    """Stat *path*, mapping OS failures onto the file error taxonomy."""
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise MarkdownNotFoundError(path) from exc
    except ValueError as exc:
        raise InvalidPathError() from exc
    except OSError as exc:
        raise MarkdownIOError(exc) from exc


def _read_bounded(path: str) -> bytes:
    """Read at most ``MAX_FILE_SIZE + 1`` bytes, rejecting oversized files."""
    try:
        with open(path, "rb") as handle:
            info = os.fstat(handle.fileno())
            if not stat.S_ISREG(info.st_mode):
                raise NotAFileError(path)
            if info.st_size > MAX_FILE_SIZE:
                raise FileTooLargeError(path, info.st_size)
            data = handle.read(MAX_FILE_SIZE + 1)
    except OSError as exc:
        raise ReadError(path, exc) from exc

    # The file grew between fstat() and read().
    if len(data) > MAX_FILE_SIZE:
        raise FileTooLargeError(path, max(info.st_size, len(data)))
    return data
