import os
import subprocess
from pathlib import Path

import pytest


def test_hide_banner_then_print_format_order():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand("ffprobe").hide_banner().print_format("json")
    assert cmd.get_args() == ["-hide_banner", "-print_format", "json"]


def test_arg_then_args_preserves_append_order():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand("ffprobe")
    assert cmd.arg("x") is cmd
    assert cmd.args(["a", "b"]) is cmd
    assert cmd.get_args() == ["x", "a", "b"]


def test_args_keeps_duplicates_and_accepts_any_iterable():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand("ffprobe").args(iter(["-v", "quiet", "-v", "quiet"])).args(())
    assert cmd.get_args() == ["-v", "quiet", "-v", "quiet"]


def test_arguments_pass_through_unvalidated():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand("ffprobe").print_format("csv=p=0").arg("").arg("file with spaces.mp4")
    assert cmd.get_args() == ["-print_format", "csv=p=0", "", "file with spaces.mp4"]


def test_path_like_arguments_are_converted():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand(Path("/opt/ff/ffprobe")).arg(Path("media") / "in.mkv")
    assert cmd.get_program() == os.fspath(Path("/opt/ff/ffprobe"))
    assert cmd.get_args() == [os.fspath(Path("media") / "in.mkv")]


def test_get_args_returns_copy():
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand("ffprobe").arg("-show_format")
    cmd.get_args().append("mutated")
    assert cmd.get_args() == ["-show_format"]


def test_default_program_is_resolved_path(fake_executable):
    from ffprobe_sidecar.command import FfprobeCommand

    cmd = FfprobeCommand().hide_banner()
    assert cmd.to_argv() == ["ffprobe", "-hide_banner"]
    assert "ffprobe" in repr(cmd)


def test_output_runs_argv_and_returns_completed_process(fake_subprocess_run, monkeypatch):
    from ffprobe_sidecar._internal import process
    from ffprobe_sidecar.command import FfprobeCommand

    seen = {}

    def _handler(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0, stdout=b"{}", stderr=b"")

    monkeypatch.setattr(process, "is_windows", lambda: True)
    fake_subprocess_run(_handler)

    result = (
        FfprobeCommand("ffprobe")
        .hide_banner()
        .print_format("json")
        .args(["-show_streams", "in.mp4"])
        .output()
    )
    assert result.stdout == b"{}"
    assert seen["cmd"] == ["ffprobe", "-hide_banner", "-print_format", "json", "-show_streams", "in.mp4"]
    assert seen["kwargs"]["creationflags"] == process._CREATE_NO_WINDOW


def test_status_can_allow_console_window(fake_subprocess_run, monkeypatch):
    from ffprobe_sidecar._internal import process
    from ffprobe_sidecar.command import FfprobeCommand

    seen = {}

    def _handler(cmd, **kwargs):
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 3)

    monkeypatch.setattr(process, "is_windows", lambda: True)
    fake_subprocess_run(_handler)

    assert FfprobeCommand("ffprobe", create_no_window=False).arg("-h").status() == 3
    assert "creationflags" not in seen["kwargs"]
    assert "stdout" not in seen["kwargs"]


def test_output_launch_failure(tmp_path):
    from ffprobe_sidecar.command import FfprobeCommand
    from ffprobe_sidecar.errors import FfprobeLaunchError

    with pytest.raises(FfprobeLaunchError):
        FfprobeCommand(tmp_path / "missing-ffprobe").hide_banner().output()
