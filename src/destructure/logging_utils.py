"""Runtime logging helpers."""

from __future__ import annotations

import logging
import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]

_PROFILE_FORMATS: dict[LogProfile, str] = {
    "cli": "{message}",
    "default": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}",
}
_CONFIGURED_PROFILE: LogProfile | None = None


class InterceptHandler(logging.Handler):
    """Route records from stdlib ``logging`` users into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        logger.opt(depth=_caller_depth(), exception=record.exc_info).bind(stdlib=record.name).log(
            _loguru_level(record), record.getMessage()
        )


def _loguru_level(record: logging.LogRecord) -> str | int:
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


def _caller_depth() -> int:
    """Depth, counted from ``emit``, of the code that called ``logging``."""
    frame, depth = sys._getframe(2), 1
    while frame is not None and frame.f_code.co_filename == logging.__file__:
        frame = frame.f_back
        depth += 1
    return depth


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(value: str | None = None) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse DESTRUCTURE_LOG_FILTER.

    Format: "level" or "level,module=level,module=false"
    Examples:
        - "warning" - global WARNING level
        - "info,destructure.core=trace" - global INFO, core engine at TRACE
        - "debug,destructure.rewrite=false" - global DEBUG, rewrite disabled

    Returns:
        (global_level, module_filter_dict)
    """
    filter_env = (value if value is not None else os.getenv("DESTRUCTURE_LOG_FILTER", "warning")).lower()
    parts = [p.strip() for p in filter_env.split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "warning"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    filter_dict.setdefault("", global_level.upper())
    return global_level, filter_dict


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(handler, InterceptHandler) for handler in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    Enables the package's loguru output, which is disabled on import, and
    routes it to stderr (or a rich handler for the "cli" profile).
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter()

    logger.remove()
    logger.enable("destructure")

    if profile == "cli":
        sink: Handler | object = _build_cli_handler()
    else:
        sink = sys.stderr

    logger.add(
        sink,
        level="TRACE",
        format=_PROFILE_FORMATS[profile],
        backtrace=False,
        diagnose=False,
        filter=module_filter,
    )

    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
