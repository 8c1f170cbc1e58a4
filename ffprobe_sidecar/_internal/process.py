"""
Helpers for launching the ffprobe executable.

Centralizes the subprocess calls shared by the locator and the command builder: console-window
suppression on Windows, stream redirection, and turning launch failures into FfprobeLaunchError.
Every call blocks until the child exits; there is no timeout.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Any, Dict, List, Sequence, Union

from ..errors import FfprobeLaunchError

logger = logging.getLogger(__name__)

# Same value as subprocess.CREATE_NO_WINDOW, which only exists on Windows builds of Python.
_CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)

_INSTALL_HINT = (
    "Please install FFmpeg (ffprobe ships with it) or place ffprobe next to the executable:\n"
    "  - macOS: brew install ffmpeg\n"
    "  - Ubuntu/Debian: apt-get install ffmpeg\n"
    "  - Windows: Download from https://ffmpeg.org/download.html"
)

Argv = Sequence[Union[str, "os.PathLike[str]"]]


def is_windows() -> bool:
    """Return True on Windows-family platforms."""
    return sys.platform.startswith("win")


def no_window_kwargs() -> Dict[str, Any]:
    """Return extra subprocess kwargs that keep Windows from flashing a console window."""
    if is_windows():
        return {"creationflags": _CREATE_NO_WINDOW}
    return {}


def _normalize(argv: Argv) -> List[str]:
    return [os.fspath(a) for a in argv]


def _launch_error(program: str, e: Exception) -> FfprobeLaunchError:
    return FfprobeLaunchError(f"Failed to launch {program}: {e}. {_INSTALL_HINT}", program=program)


def run_status(argv: Argv, *, create_no_window: bool = True, quiet: bool = False) -> int:
    """
    Run a command and return its exit status.

    With quiet=True both stdout and stderr go to the null device, otherwise they are inherited
    from the caller.
    """
    cmd = _normalize(argv)
    kwargs: Dict[str, Any] = no_window_kwargs() if create_no_window else {}
    if quiet:
        kwargs["stdout"] = subprocess.DEVNULL
        kwargs["stderr"] = subprocess.DEVNULL

    logger.debug("running %s", cmd)
    try:
        result = subprocess.run(cmd, check=False, **kwargs)
    except (OSError, ValueError) as e:
        raise _launch_error(cmd[0], e) from e
    return result.returncode


def run_capture(argv: Argv, *, create_no_window: bool = True) -> "subprocess.CompletedProcess[bytes]":
    """
    Run a command and capture stdout and stderr as bytes.

    The exit status is not checked; callers decide what a non-zero status means.
    """
    cmd = _normalize(argv)
    kwargs: Dict[str, Any] = no_window_kwargs() if create_no_window else {}

    logger.debug("running %s (capturing output)", cmd)
    try:
        return subprocess.run(cmd, capture_output=True, check=False, **kwargs)
    except (OSError, ValueError) as e:
        raise _launch_error(cmd[0], e) from e
