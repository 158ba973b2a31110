# topmark:header:start
#
#   project      : HiCat
#   file         : test_source.py
#   file_relpath : tests/pipeline/test_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the content source."""

from __future__ import annotations

import io
import os
import sys
from typing import TYPE_CHECKING

import pytest

from hicat.pipeline.source import ReadError, ReadFailure, is_stdin_path, read_contents

if TYPE_CHECKING:
    from pathlib import Path


def test_reads_utf8_preserving_newlines(tmp_path: Path) -> None:
    p = tmp_path / "f.txt"
    p.write_bytes("héllo\r\nworld\rend\n".encode())
    assert read_contents(p) == "héllo\r\nworld\rend\n"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ReadError) as excinfo:
        read_contents(tmp_path / "nope.txt")
    assert excinfo.value.reason is ReadFailure.NOT_FOUND
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert "nope.txt" in str(excinfo.value)


def test_directory(tmp_path: Path) -> None:
    with pytest.raises(ReadError) as excinfo:
        read_contents(tmp_path)
    assert excinfo.value.reason in (ReadFailure.IS_DIRECTORY, ReadFailure.PERMISSION_DENIED)


def test_undecodable(tmp_path: Path) -> None:
    p = tmp_path / "bin.dat"
    p.write_bytes(b"\xff\xfe\x00garbage\x80")
    with pytest.raises(ReadError) as excinfo:
        read_contents(p)
    assert excinfo.value.reason is ReadFailure.NOT_TEXT
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_permission_denied(tmp_path: Path) -> None:
    p = tmp_path / "secret.txt"
    p.write_text("x", encoding="utf-8")
    p.chmod(0)
    try:
        with pytest.raises(ReadError) as excinfo:
            read_contents(p)
        assert excinfo.value.reason is ReadFailure.PERMISSION_DENIED
    finally:
        p.chmod(0o644)


def test_dash_reads_given_stream() -> None:
    assert read_contents("-", stdin=io.StringIO("from stdin\n")) == "from stdin\n"


def test_is_stdin_path() -> None:
    assert is_stdin_path("-")
    assert not is_stdin_path("./-x")
