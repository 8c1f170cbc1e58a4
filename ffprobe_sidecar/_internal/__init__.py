"""
Internal shared utilities for ffprobe_sidecar.

This package is intentionally **not** part of the public surface. It exists so the locator, the
command builder and the CLI can share process launching and configuration without copying code.
"""

# Intentionally do not import submodules here to avoid side effects at import time.
# Callers should import the needed module explicitly, e.g.:
#   from . import process
#   from . import config

__all__ = ["config", "process"]
