# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for tools built on Argstyle.

Console output is either human-readable (rich) or one JSON object per line
(python-json-logger). A log file can be added on top of either. Setup never
stops a tool from starting: a log file that cannot be opened is reported as a
warning and skipped.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from argstyle.logger import logger

LOG_MODES = ("cli", "json")
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def default_log_mode(cgroup_file: Path = Path("/proc/1/cgroup")) -> str:
    """Pick the console log mode: `ARGSTYLE_LOG_MODE`, else json inside a container."""
    mode = os.getenv("ARGSTYLE_LOG_MODE")
    if mode:
        return mode
    try:
        content = cgroup_file.read_text(encoding="UTF-8")
    except OSError:
        return "cli"
    return "json" if any(marker in content for marker in CONTAINER_MARKERS) else "cli"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler | None:
    try:
        handler = logging.FileHandler(log_filename, "a", "UTF-8")
    except OSError as error:
        logger.warning("Cannot open log file '%s': %s", log_filename, error)
        return None
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root logging handlers with a console handler and an optional file.

    Args:
        mode (str | None): "cli" for rich console logs, "json" for structured
            logs. Defaults to `default_log_mode()`.
        log_filename (str | None): Optional log file, appended to.
        json_log_to_file (bool): Write the log file as JSON instead of plain text.
        file_log_level (int): Level of the file handler.
        console_log_level (int): Level of the console handler.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`. Existing handlers are
            left untouched in that case.
    """
    mode = mode or default_log_mode()
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        if file_handler is not None:
            file_handler.setLevel(file_log_level)
            root.addHandler(file_handler)

    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
