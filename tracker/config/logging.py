"""Loguru sinks shared by the API and the CLI."""

import sys
from pathlib import Path

from loguru import logger

from tracker.config.constants import TrackerConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZZ} {level: <7} {name}:{line} {message}"


def setup_logger(config: TrackerConfig) -> None:
    """Replace loguru's default sink with the tracker's console and file sinks.

    The file sink is only added when ``config.log_file`` is set; it rotates at
    5 MB and keeps the last five files. Tracebacks never include local values,
    so request payloads stay out of the logs.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=config.log_level,
        colorize=sys.stderr.isatty(),
        diagnose=False,
    )

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=config.log_level,
            rotation="5 MB",
            retention=5,
            diagnose=False,
        )

    logger.debug(f"Logging at {config.log_level} (file: {config.log_file or 'none'})")
