"""Console logging for the sketch's `wheels_of_fortune` logger namespace."""
import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO):
    """Send package logs to stdout at `level` (an int or a name like "DEBUG")."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    logger = logging.getLogger("wheels_of_fortune")
    logger.setLevel(level)
    # restarting the window in-process must not stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
