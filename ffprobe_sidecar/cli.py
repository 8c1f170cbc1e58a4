#!/usr/bin/env python3
"""
Command line interface for ffprobe_sidecar.

Subcommands:
- path: show which ffprobe would be launched and where it comes from
- check: report whether ffprobe runs
- version: print the raw `ffprobe -version` banner
- run: build and run an ffprobe command
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from ._internal.config import load_env_config
from .command import FfprobeCommand
from .errors import FfprobeError
from .locator import ffprobe_is_installed, ffprobe_path, ffprobe_version, resolve_ffprobe


def _build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command line argument parser.

    `--ffprobe` overrides the executable for `version` and `run`; when omitted, FFPROBE_PATH is
    used, then the sidecar/PATH resolution.
    """
    parser = argparse.ArgumentParser(
        prog="ffprobe-sidecar",
        description="Locate, check and invoke ffprobe (sidecar binary or PATH).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("path", help="Print the resolved ffprobe path as JSON.")
    sub.add_parser("check", help="Exit 0 if ffprobe runs, 1 otherwise.")

    version = sub.add_parser("version", help="Print the ffprobe -version banner.")
    version.add_argument("--ffprobe", default=None, help="Explicit ffprobe executable.")

    run = sub.add_parser("run", help="Run ffprobe with the given arguments.")
    run.add_argument("--ffprobe", default=None, help="Explicit ffprobe executable.")
    run.add_argument("--hide-banner", action="store_true", help="Pass -hide_banner.")
    run.add_argument("--print-format", default=None, help="Pass -print_format FORMAT.")
    run.add_argument(
        "ffprobe_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed through to ffprobe (prefix with -- to stop option parsing).",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _run(args: argparse.Namespace, program: str) -> int:
    cmd = FfprobeCommand(program)
    if args.hide_banner:
        cmd.hide_banner()
    if args.print_format:
        cmd.print_format(args.print_format)
    passthrough: List[str] = list(args.ffprobe_args)
    if passthrough and passthrough[0] == "--":
        passthrough = passthrough[1:]
    return cmd.args(passthrough).status()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI entrypoint.

    Returns a process exit code; errors are printed to stderr.
    """
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    config = load_env_config()
    _configure_logging(args.verbose or config.debug)

    if args.command == "path":
        resolved = resolve_ffprobe()
        print(json.dumps({"path": str(resolved.path), "source": resolved.source}, indent=2))
        return 0

    if args.command == "check":
        installed = ffprobe_is_installed()
        print(json.dumps({"installed": installed}, indent=2))
        return 0 if installed else 1

    program = args.ffprobe or config.ffprobe_path or str(ffprobe_path())
    try:
        if args.command == "version":
            sys.stdout.write(ffprobe_version(program))
            return 0
        return _run(args, program)
    except FfprobeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
