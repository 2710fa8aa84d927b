from __future__ import annotations

import locale
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class TempFile:
    """
    A temporary file owned by a single generation run.

    The file is deleted when the context exits (or on `release()`); deletion is
    best-effort and never raises. Once released, `path` is no longer valid.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            fd, created = tempfile.mkstemp(prefix="protobuf-generator-", suffix=".tmp")
            os.close(fd)
            path = created
        if not str(path):
            raise ValueError("path must be a non-empty path")
        self._path: Path | None = Path(path)

    @property
    def path(self) -> Path:
        if self._path is None:
            raise ValueError("TempFile has already been released")
        return self._path

    @property
    def released(self) -> bool:
        return self._path is None

    def read_lines(self) -> list[str]:
        with self.path.open("r", encoding="utf-8", errors="replace") as f:
            return [line.rstrip("\r\n") for line in f]

    def read_bytes(self) -> bytes:
        """Return the file's text with platform line endings, in the system encoding."""
        text = "".join(line + os.linesep for line in self.read_lines())
        return text.encode(locale.getpreferredencoding(False), errors="replace")

    def release(self) -> None:
        if self._path is None:
            return
        path, self._path = self._path, None
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.debug("Could not delete temp file %s: %s", path, e)

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
