"""
Errors raised by ffprobe_sidecar.

Every error derives from ValueError so callers that already treat tool failures as ValueError keep
working. Yes/no checks such as `ffprobe_is_installed` never raise these.
"""

from __future__ import annotations

import os
from typing import Optional, Union


class FfprobeError(ValueError):
    """Base class for ffprobe location and invocation failures."""


class SidecarPathError(FfprobeError):
    """The current executable's path could not be determined."""


class FfprobeLaunchError(FfprobeError):
    """The ffprobe process could not be started."""

    def __init__(self, message: str, program: Optional[Union[str, os.PathLike]] = None):
        super().__init__(message)
        self.program = os.fspath(program) if program is not None else None


class FfprobeDecodeError(FfprobeError):
    """ffprobe's output was not valid text."""
