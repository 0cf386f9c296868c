"""Tests for input/output handling (infra/text_io.py).

Filesystem tests use ``tmp_path`` only.  Streams are ``io.StringIO``.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from rotkit.exceptions import InputReadError, OutputWriteError
from rotkit.infra.text_io import read_text, write_text


# ---------------------------------------------------------------------------
# read_text
# ---------------------------------------------------------------------------

class TestReadText:
    def test_explicit_text_wins(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_text("from file", encoding="utf-8")
        assert read_text("inline", path=path) == "inline"

    def test_empty_string_is_still_explicit(self) -> None:
        assert read_text("", stream=io.StringIO("stdin")) == ""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_text("Uryyb\n", encoding="utf-8")
        assert read_text(path=path) == "Uryyb\n"

    def test_reads_stream(self) -> None:
        assert read_text(stream=io.StringIO("piped")) == "piped"

    def test_defaults_to_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
        assert read_text() == "from stdin"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError, match="not found") as exc_info:
            read_text(path=tmp_path / "missing.txt")
        assert exc_info.value.hint is not None

    def test_invalid_encoding_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(InputReadError, match="not valid utf-8"):
            read_text(path=path)

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError):
            read_text(path=tmp_path)


# ---------------------------------------------------------------------------
# write_text
# ---------------------------------------------------------------------------

class TestWriteText:
    def test_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        write_text("Uryyb", path=path)
        assert path.read_text(encoding="utf-8") == "Uryyb"

    def test_writes_stream(self) -> None:
        sink = io.StringIO()
        write_text("Uryyb", stream=sink)
        assert sink.getvalue() == "Uryyb"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        write_text("Uryyb")
        assert capsys.readouterr().out == "Uryyb"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OutputWriteError) as exc_info:
            write_text("x", path=tmp_path / "no" / "such" / "out.txt")
        assert exc_info.value.hint is not None
