from __future__ import annotations

import logging
import pathlib
import sys
import traceback

LOG_FILE_NAME = "breakthrough-solver.log"


def get_log_path() -> pathlib.Path:
    return pathlib.Path.cwd() / LOG_FILE_NAME


def setup_logging(overwrite: bool = True, level: int = logging.INFO, log_file: bool = True) -> None:
    """Configure root logging once per process.

    - Writes to a single file in the current working directory (overwritten
      on first setup if overwrite is True) unless log_file is False
    - Adds a STDERR handler for immediate visibility
    - Installs sys.excepthook so crashes land in the log
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, "_bs_logging_configured", False):
        root_logger.setLevel(level)
        return

    fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = []
    if log_file:
        file_mode = "w" if overwrite else "a"
        file_handler = logging.FileHandler(get_log_path(), mode=file_mode, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        handlers.append(file_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    handlers.append(stderr_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    root_logger._bs_logging_configured = True  # type: ignore[attr-defined]

    logging.captureWarnings(True)
    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]


def reset_logging() -> None:
    """Drop handlers installed by setup_logging (used between CLI runs in tests)."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger._bs_logging_configured = False  # type: ignore[attr-defined]
    sys.excepthook = sys.__excepthook__


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)
