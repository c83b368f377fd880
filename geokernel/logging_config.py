"""
Logging Configuration

The kernel logs only at DEBUG, when it settles a degenerate input: parallel
lines, points skipped by the coplanarity check, the opposite rotation sense.
Libraries leave output to the application; this helper is for scripts and
debugging sessions that want to see those decisions.
"""
import logging
from typing import IO, Optional

PACKAGE_LOGGER = "geokernel"

# Handler names this module owns, replaced on every call
_STREAM_HANDLER = "geokernel.stream"
_FILE_HANDLER = "geokernel.file"


def _drop_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if handler.get_name() in (_STREAM_HANDLER, _FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(level: int = logging.DEBUG,
                  log_file: Optional[str] = None,
                  stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Send the kernel log records to a stream and, optionally, a file.

    Calling it again replaces the handlers it installed before. Handlers the
    application attached to the package logger are left alone.

    Args:
        level: Level of the package logger and its handlers
        log_file: Optional path of a file to append the records to
        stream: Stream for the records; stderr when None

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _drop_owned_handlers(logger)

    stream_handler = logging.StreamHandler(stream)
    stream_handler.set_name(_STREAM_HANDLER)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(file_handler)

    return logger
