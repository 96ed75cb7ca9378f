"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from md_reader import __version__
from md_reader.cli import exit_codes
from md_reader.cli.app import main
from md_reader.exceptions import (
    ArgumentError,
    EmptyPathError,
    FileTooLargeError,
    InvalidExtensionError,
    InvalidPathArgumentError,
    InvalidPathError,
    MarkdownFileError,
    MarkdownIOError,
    MarkdownNotFoundError,
    MdReaderError,
    NoArgumentsError,
    NotAFileError,
    ReadError,
    UnknownFlagError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [NoArgumentsError, EmptyPathError, InvalidPathArgumentError, UnknownFlagError],
    )
    def test_argument_errors_share_a_base(self, exc_class: type[MdReaderError]) -> None:
        assert issubclass(exc_class, ArgumentError)
        assert not issubclass(exc_class, MarkdownFileError)

    @pytest.mark.parametrize(
        "exc_class",
        [
            MarkdownNotFoundError,
            NotAFileError,
            InvalidExtensionError,
            ReadError,
            FileTooLargeError,
            InvalidPathError,
            MarkdownIOError,
        ],
    )
    def test_file_errors_share_a_base(self, exc_class: type[MdReaderError]) -> None:
        assert issubclass(exc_class, MarkdownFileError)
        assert not issubclass(exc_class, ArgumentError)

    def test_categories_inherit_from_base(self) -> None:
        assert issubclass(ArgumentError, MdReaderError)
        assert issubclass(MarkdownFileError, MdReaderError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(MdReaderError, Exception)

    def test_hint_is_stored(self) -> None:
        err = MdReaderError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = MdReaderError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_broken_pipe_is_141(self) -> None:
        assert exit_codes.BROKEN_PIPE == 141


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_help_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--help"]) == exit_codes.SUCCESS

    def test_no_args_raises(self) -> None:
        with pytest.raises(NoArgumentsError):
            main([])

    def test_path_routes_to_reader(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from md_reader.cli import app as app_module

        seen: list[str] = []

        def _fake_read(path: str) -> int:
            seen.append(path)
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_read", _fake_read)
        assert main(["docs/guide.md"]) == exit_codes.SUCCESS
        assert seen == ["docs/guide.md"]

    def test_argv_defaults_to_sys_argv(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["md-reader", "-h"])
        assert main() == exit_codes.SUCCESS
        assert "USAGE:" in capsys.readouterr().out
