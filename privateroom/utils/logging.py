"""Loguru sinks for the bot process."""

import sys

from loguru import logger

from privateroom.config.schema import LoggingConfig

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {name}:{line} {message}"


def configure_logging(config: LoggingConfig) -> None:
    """Replace the default sink with a console sink at config.level and
    a rotating DEBUG file sink at config.file_path.
    """
    logger.remove()
    logger.add(sys.stderr, level=config.level.upper(), format=_CONSOLE_FORMAT)

    config.file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        config.file_path,
        level="DEBUG",
        format=_FILE_FORMAT,
        rotation=config.rotation,
        retention=config.retention,
        enqueue=True,
    )
    logger.debug(f"Logging to console at {config.level} and to {config.file_path}")
