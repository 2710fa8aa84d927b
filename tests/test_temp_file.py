import locale
import os
from pathlib import Path

import pytest

from protobuf_generator.core.temp_file import TempFile


def test_temp_file_created_and_removed_on_exit():
    with TempFile() as temp:
        path = temp.path
        assert path.exists()
    assert not path.exists()
    assert temp.released is True


def test_temp_file_removed_when_body_raises():
    with pytest.raises(RuntimeError):
        with TempFile() as temp:
            path = temp.path
            raise RuntimeError("boom")
    assert not path.exists()


def test_path_after_release_is_an_error():
    temp = TempFile()
    temp.release()
    with pytest.raises(ValueError):
        _ = temp.path


def test_release_is_idempotent_and_tolerates_missing_file():
    temp = TempFile()
    temp.path.unlink()
    temp.release()
    temp.release()


def test_adopts_given_path(tmp_path: Path):
    target = tmp_path / "given.txt"
    target.write_text("x", encoding="utf-8")
    with TempFile(target) as temp:
        assert temp.path == target
    assert not target.exists()


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        TempFile("")


def test_read_bytes_normalizes_line_endings():
    with TempFile() as temp:
        temp.path.write_bytes(b"one\r\ntwo\nthree")
        data = temp.read_bytes()
    expected = f"one{os.linesep}two{os.linesep}three{os.linesep}"
    assert data == expected.encode(locale.getpreferredencoding(False))


def test_read_lines_strips_terminators():
    with TempFile() as temp:
        temp.path.write_text("a\n\nb\n", encoding="utf-8")
        assert temp.read_lines() == ["a", "", "b"]
