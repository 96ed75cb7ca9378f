"""md-reader — validate and print a single markdown file.

A guarded file-read front end: argument resolution, path validation,
filesystem checks and a bounded read, layered the same way as the rest
of the package (``core`` → ``infra`` → ``cli``).
"""

from md_reader.version import __version__

__all__: list[str] = ["__version__"]
