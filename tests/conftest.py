"""Shared pytest fixtures and configuration for the md-reader test suite.

Guidelines
----------
* No network access in any test.
* Filesystem work happens under ``tmp_path`` only.
* Core tests must be pure — no side effects.
* OS failures that cannot be provoked portably are simulated with
  ``unittest.mock.patch`` at the infra boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing *content* to ``tmp_path / name`` and returning the path.

    ``str`` content is UTF-8 encoded as-is (no newline translation);
    ``bytes`` content is written unchanged.
    """

    def _make(name: str, content: str | bytes = "") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        data = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        return path

    return _make
