"""Console logging for N2H.

Export progress goes to stdout next to the run summary, so the handler
writes there rather than to stderr.
"""

import logging
import sys
from typing import Optional, TextIO, Union

LOGGER_NAME = "n2h"
LOG_FORMAT = "[ %(levelname)-8s ] %(message)s"
# Debug runs also show which module logged the line.
DEBUG_LOG_FORMAT = "[ %(levelname)-8s ] %(module)s: %(message)s"


def setup_logger(
    name: str = LOGGER_NAME,
    level: Union[str, int] = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """(Re)bind the exporter logger to a console stream.

    Any handler from an earlier call is replaced, so ``cli.main`` can
    switch to DEBUG after import time.

    Args:
        name: Logger name
        level: Logging level, name or number
        stream: Output stream, the current ``sys.stdout`` by default

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(
        DEBUG_LOG_FORMAT if logger.level <= logging.DEBUG else LOG_FORMAT
    ))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


logger = setup_logger()
