"""Custom exception hierarchy for md-reader.

Every failure the program can report is a subclass of
:class:`MdReaderError`.  Raw ``OSError`` / ``UnicodeDecodeError``
instances must NEVER propagate beyond the infrastructure layer — they
are caught and re-raised (chained) as a typed subclass defined here.

Each subclass formats its own message from the data it carries, so the
user-facing text is decided in exactly one place.

Hierarchy
---------
MdReaderError
├── ArgumentError
│   ├── NoArgumentsError
│   ├── EmptyPathError
│   ├── InvalidPathArgumentError
│   └── UnknownFlagError
└── MarkdownFileError
    ├── MarkdownNotFoundError
    ├── NotAFileError
    ├── InvalidExtensionError
    ├── ReadError
    ├── FileTooLargeError
    ├── InvalidPathError
    └── MarkdownIOError
"""

from __future__ import annotations

from md_reader.utils.constants import MAX_FILE_SIZE


class MdReaderError(Exception):
    """Base exception for all md-reader errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument errors -------------------------------------------------------

class ArgumentError(MdReaderError):
    """Raised when the invocation arguments cannot be resolved.

    Detected before any filesystem access.  The CLI follows these with a
    pointer to ``--help`` instead of a hint.
    """


class NoArgumentsError(ArgumentError):
    """Raised when the program is invoked without any argument."""

    def __init__(self) -> None:
        super().__init__("No arguments provided")


class EmptyPathError(ArgumentError):
    """Raised when the path argument is empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("File path cannot be empty")


class InvalidPathArgumentError(ArgumentError):
    """Raised when the path argument contains forbidden characters."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid file path: '{path}'")
        self.path: str = path


class UnknownFlagError(ArgumentError):
    """Raised for any dash-prefixed argument that is not a help flag."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"Unknown flag: '{flag}'")
        self.flag: str = flag


# --- File errors -----------------------------------------------------------

class MarkdownFileError(MdReaderError):
    """Raised when the target file cannot be validated or read."""


class MarkdownNotFoundError(MarkdownFileError):
    """Raised when no filesystem entry exists at the given path."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"File not found: '{path}'",
            hint="Make sure the file path is correct and the file exists.",
        )
        self.path: str = path


class NotAFileError(MarkdownFileError):
    """Raised when the path exists but is not a regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Path is not a file: '{path}'",
            hint=(
                "The path points to a directory or special file; "
                "pass a markdown file instead."
            ),
        )
        self.path: str = path


class InvalidExtensionError(MarkdownFileError):
    """Raised when the file name does not end in ``.md`` / ``.markdown``."""

    def __init__(self, path: str, extension: str) -> None:
        super().__init__(
            f"File '{path}' has invalid extension '{extension}', "
            "expected '.md' or '.markdown'",
            hint="Markdown files must have a .md or .markdown extension.",
        )
        self.path: str = path
        self.extension: str = extension


class ReadError(MarkdownFileError):
    """Raised when opening, reading or decoding the file fails."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(
            f"Failed to read file '{path}': {cause}",
            hint="Check file permissions and ensure the file is UTF-8 encoded.",
        )
        self.path: str = path
        self.cause: BaseException = cause


class FileTooLargeError(MarkdownFileError):
    """Raised when the file content exceeds :data:`MAX_FILE_SIZE`."""

    def __init__(self, path: str, size: int) -> None:
        super().__init__(
            f"File '{path}' is too large ({size} bytes), "
            f"maximum allowed is {MAX_FILE_SIZE} bytes",
            hint="Markdown files larger than 10 MiB are not supported.",
        )
        self.path: str = path
        self.size: int = size


class InvalidPathError(MarkdownFileError):
    """Raised when the OS refuses the path string itself (e.g. embedded NUL).

    Unreachable through the CLI, where the argument resolver rejects such
    paths first; only direct callers of :mod:`md_reader.infra` see it.
    """

    def __init__(self) -> None:
        super().__init__(
            "Invalid file path provided",
            hint="Please provide a valid file path.",
        )


class MarkdownIOError(MarkdownFileError):
    """Catch-all for filesystem failures not covered above."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(
            f"I/O error: {cause}",
            hint="Check file permissions and ensure the file is accessible.",
        )
        self.cause: OSError = cause
