# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
import shutil
import sys
from typing import Sequence

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def split_tokens(line: str) -> list[str]:
    """
    Split a command line on single spaces.

    No quoting is supported. Consecutive spaces produce empty tokens.
    """
    return line.split(" ")


def get_env_tokens(argv: Sequence[str] | None = None) -> list[str]:
    """Return the invocation tokens without the program path."""
    if argv is None:
        argv = sys.argv
    return list(argv[1:])


NUMBER_PATTERN = re.compile(r"-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def is_number(token: str) -> bool:
    """True for plain decimal literals such as `-3`, `2.5` or `-1e3`."""
    return NUMBER_PATTERN.fullmatch(token) is not None


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for the `clip` logger and whatever else logs through root.

    Resolution diagnostics are emitted at DEBUG, so raise `console_log_level`
    or pass `log_filename` to see them.

    Args:
        mode (str | None):
            "cli" for Rich console output, "json" for one JSON object per
            record. Defaults to `CLIP_LOG_MODE`, then to "json" inside a
            container and "cli" elsewhere.
        log_filename (str | None):
            Path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("CLIP_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            formatter: logging.Formatter = pythonjsonlogger.json.JsonFormatter(
                JSON_LOG_FORMAT
            )
        else:
            formatter = logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("clip").debug("Logging initialized in '%s' mode.", mode)
