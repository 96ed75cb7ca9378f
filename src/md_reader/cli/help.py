"""Help and usage text for ``md-reader``.

The help block is a fixed literal written to stdout; the usage pointer
follows argument errors on stderr.
"""

from __future__ import annotations

from md_reader.utils.constants import PROGRAM_NAME
from md_reader.version import __version__

HELP_TEXT: str = f"""\
Markdown Reader v{__version__}

USAGE:
    {PROGRAM_NAME} <markdown_file>

ARGUMENTS:
    <markdown_file>    Path to the markdown file to read
                       Must have a .md or .markdown extension

OPTIONS:
    -h, --help         Display this help message

EXAMPLES:
    Read a markdown file:
        $ {PROGRAM_NAME} README.md

    Read a file in a subdirectory:
        $ {PROGRAM_NAME} docs/guide.md

    Show help:
        $ {PROGRAM_NAME} --help
"""

USAGE_POINTER: str = f"Use '{PROGRAM_NAME} --help' for more information."


def display_help() -> None:
    """Print :data:`HELP_TEXT` to stdout."""
    print(HELP_TEXT)
