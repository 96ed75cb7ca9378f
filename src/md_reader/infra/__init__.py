"""Infrastructure layer — filesystem access.

Every raw ``OSError`` / ``UnicodeDecodeError`` must be caught here and
re-raised as a :class:`~md_reader.exceptions.MdReaderError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from md_reader.infra.markdown_reader import (
    file_extension,
    is_markdown_file,
    read_markdown_file,
)

__all__: list[str] = [
    "file_extension",
    "is_markdown_file",
    "read_markdown_file",
]
