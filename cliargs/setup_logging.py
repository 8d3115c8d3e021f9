"""Configure loguru logging for the command line tool."""

import sys
from pathlib import Path

from loguru import logger


def setup_logging(level: str = "ERROR", log_file: Path | None = None) -> None:
    logger.remove()
    logger.enable("cliargs")
    logger.add(sys.stderr, level=level.upper())
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation="1 MB",
        retention=3,
        encoding="utf-8",
        level="DEBUG",
    )
