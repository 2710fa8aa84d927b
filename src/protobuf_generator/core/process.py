from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

IS_WINDOWS = os.name == "nt"


def _hidden_window_kwargs() -> dict:
    if not IS_WINDOWS:
        return {}
    startupinfo = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW  # type: ignore[attr-defined]
    startupinfo.wShowWindow = subprocess.SW_HIDE  # type: ignore[attr-defined]
    return {
        "startupinfo": startupinfo,
        "creationflags": subprocess.CREATE_NO_WINDOW,  # type: ignore[attr-defined]
    }


def execute(application: str | Path, args: Sequence[str], working_directory: str | Path) -> int:
    """
    Run `application` with `args` and block until it exits.

    No timeout is applied. The child's window is hidden on Windows and its
    stdout/stderr are discarded; callers read results from files the tool writes.
    """
    cmd = [str(application), *args]
    logger.debug("Running %s (cwd=%s)", subprocess.list2cmdline(cmd), working_directory)
    proc = subprocess.run(
        cmd,
        cwd=str(working_directory),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        **_hidden_window_kwargs(),
    )
    logger.debug("%s exited with code %d", Path(application).name, proc.returncode)
    return proc.returncode
