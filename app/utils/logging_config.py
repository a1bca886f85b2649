import logging
import sys

from app.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configures the `helpdesk` logger with a single stdout handler.
    Debug mode lowers the level to DEBUG.
    """
    logger = logging.getLogger("helpdesk")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


logger = setup_logging(settings.DEBUG)
