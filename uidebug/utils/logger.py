"""Logger factory used by the command-line entry point."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str, level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Return a named logger with a stream handler (and optional file handler) attached.

    Handlers are added only on the first call for ``name``; later calls just
    update the level. Child loggers such as ``uidebug.core.parser`` reach these
    handlers through propagation.

    Args:
        name: Logger name.
        level: Level name such as ``"DEBUG"``. When omitted, the level and log
            file come from the global configuration.
        log_file: Optional file that receives the same records.

    Returns:
        The configured logger.
    """
    if level is None:
        from uidebug.config import config
        level = config.log_level
        log_file = log_file if log_file is not None else config.log_file

    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        logger.addHandler(stream)

        if log_file is not None:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
