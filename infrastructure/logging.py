"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"


def init_logging(level: str = DEFAULT_LEVEL, log_dir: str | None = None) -> None:
    """Log to stderr at `level`, plus a rotating file under `log_dir` if given.

    Stdout is left alone since it carries the rename output.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="{level}: {message}")

    if log_dir is None:
        return
    log_path = Path(log_dir).expanduser()
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_path / "renamer_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        backtrace=False,
        diagnose=False,
        level="DEBUG",
    )
