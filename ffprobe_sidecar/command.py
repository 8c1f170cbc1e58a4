"""
Builder for ffprobe command lines.

FfprobeCommand collects arguments with a few presets mirroring ffprobe's documented options
(https://ffmpeg.org/ffprobe.html). Refer there for the exhaustive list of possible arguments;
anything not covered by a preset goes through `arg`/`args` unchanged.

Example:
    >>> cmd = FfprobeCommand("ffprobe").hide_banner().print_format("json").arg("in.mp4")
    >>> cmd.to_argv()
    ['ffprobe', '-hide_banner', '-print_format', 'json', 'in.mp4']
"""

from __future__ import annotations

import os
import subprocess
from typing import Iterable, List, Optional, Union

from ._internal import process
from .locator import ffprobe_path

StrOrPath = Union[str, "os.PathLike[str]"]


class FfprobeCommand:
    """
    Mutable argument builder for a single ffprobe invocation.

    Every builder method appends to the argument list and returns the same instance so calls can
    be chained. Arguments are never validated, reordered or de-duplicated.
    """

    def __init__(self, program: Optional[StrOrPath] = None, *, create_no_window: bool = True):
        """
        Args:
            program: Executable to launch. Defaults to the resolved ffprobe (sidecar or PATH).
            create_no_window: Suppress the console window on Windows when launching.
        """
        self._program = os.fspath(program) if program is not None else os.fspath(ffprobe_path())
        self._args: List[str] = []
        self.create_no_window = create_no_window

    # Generic option aliases: https://ffmpeg.org/ffprobe.html#Generic-options

    def hide_banner(self) -> "FfprobeCommand":
        """
        Alias for `-hide_banner`.

        All FFmpeg tools normally show a copyright notice, build options and library versions.
        This option suppresses printing that information.
        """
        return self.arg("-hide_banner")

    def print_format(self, value: str) -> "FfprobeCommand":
        """
        Alias for `-print_format`.

        Sets the output printing format: the writer name, optionally followed by writer options
        (e.g. `json`, `csv=p=0`).
        """
        self.arg("-print_format")
        return self.arg(value)

    # Passthrough

    def arg(self, value: StrOrPath) -> "FfprobeCommand":
        """Add one argument to pass to ffprobe."""
        self._args.append(os.fspath(value))
        return self

    def args(self, values: Iterable[StrOrPath]) -> "FfprobeCommand":
        """Add multiple arguments to pass to ffprobe, in iteration order."""
        for value in values:
            self.arg(value)
        return self

    def get_program(self) -> str:
        return self._program

    def get_args(self) -> List[str]:
        return list(self._args)

    def to_argv(self) -> List[str]:
        return [self._program, *self._args]

    # Execution

    def output(self) -> "subprocess.CompletedProcess[bytes]":
        """
        Run the command and capture stdout and stderr as bytes.

        The exit status is left for the caller to inspect.

        Raises:
            FfprobeLaunchError: If ffprobe cannot be started.
        """
        return process.run_capture(self.to_argv(), create_no_window=self.create_no_window)

    def status(self) -> int:
        """
        Run the command with inherited stdout/stderr and return the exit status.

        Raises:
            FfprobeLaunchError: If ffprobe cannot be started.
        """
        return process.run_status(self.to_argv(), create_no_window=self.create_no_window)

    def __repr__(self) -> str:
        return f"FfprobeCommand({self.to_argv()!r})"
