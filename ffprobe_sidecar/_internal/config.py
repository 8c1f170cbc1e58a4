"""
Environment-based configuration for ffprobe_sidecar.

A local `.env` file is honoured so an explicit ffprobe can be pinned per project without touching
the shell environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@lru_cache(maxsize=1)
def _load_local_dotenv_once() -> None:
    """
    Load a local .env file once per process.

    This uses python-dotenv to find `.env` by walking up from the current working directory. It
    does not override existing environment variables by default.
    """

    load_dotenv(override=False)


@dataclass(frozen=True)
class FfprobeEnvConfig:
    """
    Hold configuration resolved from environment variables.

    The following environment variables are used when present:
    - FFPROBE_PATH: explicit ffprobe executable for the CLI
    - FFPROBE_SIDECAR_DEBUG: enable debug logging in the CLI
    """

    ffprobe_path: Optional[str]
    debug: bool


def coerce_bool(value: object) -> Optional[bool]:
    """
    Convert common truthy/falsey values into a boolean.

    Returns None when the value is None or cannot be interpreted.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "t", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "f", "no", "n", "off"}:
            return False
    return None


def load_env_config() -> FfprobeEnvConfig:
    """Load configuration from the environment (and a local .env, if any)."""

    _load_local_dotenv_once()

    ffprobe_path = (os.environ.get("FFPROBE_PATH") or "").strip() or None
    debug = coerce_bool(os.environ.get("FFPROBE_SIDECAR_DEBUG")) or False
    return FfprobeEnvConfig(ffprobe_path=ffprobe_path, debug=debug)
