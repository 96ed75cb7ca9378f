"""Constants shared by every layer.

There is no runtime configuration (no config files, no environment
variables); every tunable lives here.
"""

from __future__ import annotations

PROGRAM_NAME: str = "md-reader"
"""Name shown in the help banner and usage pointer."""

MAX_FILE_SIZE: int = 10 * 1024 * 1024
"""Size ceiling in bytes (10 MiB) for readable file content."""

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({"md", "markdown"})
"""Accepted extensions, lowercase, without the leading dot."""

NO_EXTENSION: str = "none"
"""Marker reported when a file name carries no extension at all."""

INVALID_PATH_CHARS: frozenset[str] = frozenset('\0<>:"|?*')
"""Characters rejected in a path argument (invalid on common filesystems)."""

HELP_FLAGS: tuple[str, ...] = ("--help", "-h")

INFORMATION_SEPARATORS: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")
"""Counted as whitespace by ``str.isspace`` but not by Unicode ``White_Space``."""
