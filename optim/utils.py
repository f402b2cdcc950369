# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

MAX_FILE_ARGUMENTS = 256


def load_argument_file(program: str, path: Path | str) -> list[str]:
    """
    Build an argument vector from a newline-delimited file.

    The first empty line ends the list. Used to drive the demo program from
    fuzzer-generated inputs.

    Args:
        program (str): Value for `argv[0]`.
        path (Path | str): The file to read.

    Returns:
        list[str]: `[program, *lines]`, at most `MAX_FILE_ARGUMENTS` entries.
    """
    with open(path, "r", encoding="UTF-8", errors="replace") as f:
        content = f.read()

    argv = [program]
    for line in content.split("\n"):
        if not line or len(argv) >= MAX_FILE_ARGUMENTS:
            break
        argv.append(line)
    return argv


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def verbosity_to_level(verbosity: int) -> int:
    """Map a `-v` count to a console log level: 0 → WARNING, 1 → INFO, 2+ → DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
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
    Route the `optim` logger to a Rich console handler or a JSON stream
    handler, and optionally to a log file.

    Args:
        mode (str | None): "cli" for Rich output, "json" for structured
            output. Defaults to `OPTIM_LOG_MODE`, then to "json" inside a
            container and "cli" elsewhere.
        log_filename (str | None): Log file path, or None for no file.
        json_log_to_file (bool): Write the log file as JSON lines.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json". Existing handlers are
            left untouched in that case.
    """
    if not mode:
        mode = os.getenv("OPTIM_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    handlers = [_console_handler(mode)]
    handlers[0].setLevel(console_log_level)
    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)

    logger = logging.getLogger("optim")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
