"""Core layer — pure request resolution and validation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from md_reader.core.argument_resolver import resolve_arguments
from md_reader.core.models import ParsedRequest, ReadPath, ShowHelp
from md_reader.core.path_validator import is_blank, is_valid_path

__all__: list[str] = [
    "ParsedRequest",
    "ReadPath",
    "ShowHelp",
    "is_blank",
    "is_valid_path",
    "resolve_arguments",
]
