import json
import os
import stat
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture()
def fake_subprocess_run(monkeypatch: pytest.MonkeyPatch):
    """
    Patch subprocess.run as seen by ffprobe_sidecar._internal.process.

    The handler receives the command list and keyword arguments and returns a
    subprocess.CompletedProcess (or raises, to simulate a launch failure).
    """

    def _apply(handler: Callable[..., Any]) -> None:
        from ffprobe_sidecar._internal import process

        def _fake_run(cmd, **kwargs):
            return handler(cmd, **kwargs)

        monkeypatch.setattr(process.subprocess, "run", _fake_run)

    return _apply


@pytest.fixture()
def fake_executable(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Pretend the running interpreter lives in a fresh temp directory.

    Returns that directory; any `ffprobe` written there becomes the sidecar.
    """
    bindir = tmp_path / "bin"
    bindir.mkdir()
    monkeypatch.setattr("sys.executable", str(bindir / "python"))
    return bindir


@pytest.fixture()
def empty_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point PATH at an empty directory so a bare `ffprobe` cannot be found."""
    d = tmp_path / "empty-path"
    d.mkdir()
    monkeypatch.setenv("PATH", str(d))
    return d


@pytest.fixture()
def write_script():
    """
    Factory for small POSIX shell scripts standing in for ffprobe.
    """

    def _write(path: Path, body: str, *, executable: bool = True) -> Path:
        path.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        if executable:
            mode = os.stat(path).st_mode
            os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _write


@pytest.fixture()
def json_stdout(capsys: pytest.CaptureFixture[str]) -> Callable[[], Any]:
    """Return a callable that parses captured stdout as JSON."""

    def _read() -> Any:
        out = capsys.readouterr().out.strip()
        assert out, "expected stdout to contain JSON"
        return json.loads(out)

    return _read
