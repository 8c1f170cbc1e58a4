"""
Locate ffprobe and ask it basic questions.

The preferred binary is a *sidecar*: an `ffprobe` placed in the same directory as the running
executable (for example inside a frozen application bundle). When no sidecar exists the bare name
`ffprobe` is used and the operating system searches PATH when the process is launched.

Nothing is cached; every call recomputes the path and checks the filesystem again.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ._internal import process
from .errors import FfprobeDecodeError, FfprobeError, SidecarPathError

logger = logging.getLogger(__name__)

FFPROBE_NAME = "ffprobe"


@dataclass(frozen=True)
class SidecarPath:
    """An ffprobe found next to the current executable."""

    path: Path
    source: str = field(default="sidecar", init=False)


@dataclass(frozen=True)
class SystemSearchPath:
    """A bare executable name, left for the OS to resolve through PATH."""

    name: str = FFPROBE_NAME
    source: str = field(default="system", init=False)

    @property
    def path(self) -> Path:
        return Path(self.name)


def ffprobe_sidecar_path() -> Path:
    """
    Return the expected path of an ffprobe binary adjacent to the current executable.

    Windows uses the `.exe` extension while macOS and Linux have none. The returned path is not
    guaranteed to exist.

    Raises:
        SidecarPathError: If the current executable is unknown or has no parent directory.
    """
    exe = sys.executable
    if not exe:
        raise SidecarPathError("Cannot determine the path of the current executable")

    current = Path(os.path.abspath(exe))
    parent = current.parent
    if parent == current:
        raise SidecarPathError(f"Current executable has no parent directory: {current}")

    path = parent / FFPROBE_NAME
    if process.is_windows():
        path = path.with_suffix(".exe")
    return path


def resolve_ffprobe() -> Union[SidecarPath, SystemSearchPath]:
    """
    Decide which ffprobe to launch.

    Returns SidecarPath when a file exists at the sidecar location, otherwise SystemSearchPath.
    Never raises.
    """
    try:
        sidecar = ffprobe_sidecar_path()
    except SidecarPathError as e:
        logger.debug("sidecar lookup failed, falling back to PATH: %s", e)
        return SystemSearchPath()

    if sidecar.exists():
        logger.debug("using sidecar ffprobe at %s", sidecar)
        return SidecarPath(sidecar)

    logger.debug("no sidecar at %s, falling back to PATH", sidecar)
    return SystemSearchPath()


def ffprobe_path() -> Path:
    """
    Return the path of the sidecar ffprobe, or `ffprobe` to rely on PATH.

    Note that not all FFmpeg distributions include ffprobe.
    """
    return resolve_ffprobe().path


def ffprobe_is_installed() -> bool:
    """
    Check whether ffprobe can be run.

    True when `ffprobe -version` launches and exits successfully, using the sidecar binary or
    the one found on PATH. Any failure counts as "not installed".
    """
    try:
        status = process.run_status([ffprobe_path(), "-version"], quiet=True)
    except FfprobeError as e:
        logger.debug("ffprobe is not installed: %s", e)
        return False
    return status == 0


def ffprobe_version_with_path(path: Union[str, "os.PathLike[str]"]) -> str:
    """
    Run `<path> -version` and return its standard output as text.

    The banner is returned exactly as printed; version numbers are not parsed out of it.

    Raises:
        FfprobeLaunchError: If the process cannot be started.
        FfprobeDecodeError: If the output is not valid UTF-8.
    """
    result = process.run_capture([path, "-version"])
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FfprobeDecodeError(f"ffprobe -version output is not valid UTF-8: {e}") from e


def ffprobe_version(path: Optional[Union[str, "os.PathLike[str]"]] = None) -> str:
    """Alias for `ffprobe -version`, using the resolved ffprobe unless a path is given."""
    return ffprobe_version_with_path(path if path is not None else ffprobe_path())
