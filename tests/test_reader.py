"""Tests for input sources."""

from __future__ import annotations

from io import BytesIO, StringIO, TextIOWrapper
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from conftest import SAMPLE_LINES

from logshade.reader import is_pipe, iter_lines, open_input

if TYPE_CHECKING:
    from pathlib import Path


class TestOpenInput:
    def test_reads_file(self, sample_log_file: Path) -> None:
        with open_input(sample_log_file) as f:
            lines = list(iter_lines(f))
        assert lines == SAMPLE_LINES

    def test_none_is_stdin(self) -> None:
        fake = StringIO("a\nb\n")
        with patch("logshade.reader.sys.stdin", fake):
            assert open_input(None) is fake

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            open_input(tmp_path / "nope.log")


class TestIterLines:
    def test_strips_newlines(self) -> None:
        assert list(iter_lines(StringIO("one\ntwo\n"))) == ["one", "two"]

    def test_strips_crlf(self) -> None:
        assert list(iter_lines(StringIO("one\r\ntwo\r\n"))) == ["one", "two"]

    def test_last_line_without_newline(self) -> None:
        assert list(iter_lines(StringIO("one\ntwo"))) == ["one", "two"]

    def test_keeps_blank_lines(self) -> None:
        assert list(iter_lines(StringIO("one\n\nthree\n"))) == ["one", "", "three"]

    def test_keeps_inner_whitespace(self) -> None:
        assert list(iter_lines(["  indented\t\n"])) == ["  indented\t"]

    def test_empty(self) -> None:
        assert list(iter_lines(StringIO(""))) == []


class TestIsPipe:
    def test_is_pipe_true(self) -> None:
        with patch("logshade.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = False
            assert is_pipe() is True

    def test_is_pipe_false(self) -> None:
        with patch("logshade.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = True
            assert is_pipe() is False


class TestRawInputBytes:
    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        log_file = tmp_path / "mixed.log"
        log_file.write_bytes(b"first\ncaf\xe9 latin1\nthird line\n")
        with open_input(log_file) as f:
            lines = list(iter_lines(f))
        assert lines == ["first", "caf\ufffd latin1", "third line"]

    def test_bare_cr_is_not_a_line_break(self, tmp_path: Path) -> None:
        log_file = tmp_path / "cr.log"
        log_file.write_bytes(b"a\rb\nnext\r\n")
        with open_input(log_file) as f:
            lines = list(iter_lines(f))
        assert lines == ["a\rb", "next"]

    def test_stdin_reconfigured(self) -> None:
        fake = TextIOWrapper(BytesIO(b"caf\xe9\na\rb\n"), encoding="utf-8")
        with patch("logshade.reader.sys.stdin", fake):
            lines = list(iter_lines(open_input(None)))
        assert lines == ["caf\ufffd", "a\rb"]
