"""Locate, check and invoke ffprobe, preferring a sidecar binary next to the executable."""

from importlib.metadata import version

from ffprobe_sidecar.command import FfprobeCommand
from ffprobe_sidecar.errors import (
    FfprobeDecodeError,
    FfprobeError,
    FfprobeLaunchError,
    SidecarPathError,
)
from ffprobe_sidecar.locator import (
    SidecarPath,
    SystemSearchPath,
    ffprobe_is_installed,
    ffprobe_path,
    ffprobe_sidecar_path,
    ffprobe_version,
    ffprobe_version_with_path,
    resolve_ffprobe,
)

try:
    __version__ = version(__name__)
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "FfprobeCommand",
    "FfprobeDecodeError",
    "FfprobeError",
    "FfprobeLaunchError",
    "SidecarPath",
    "SidecarPathError",
    "SystemSearchPath",
    "ffprobe_is_installed",
    "ffprobe_path",
    "ffprobe_sidecar_path",
    "ffprobe_version",
    "ffprobe_version_with_path",
    "resolve_ffprobe",
]
