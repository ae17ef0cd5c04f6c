import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Optional

# Parent of every module logger in the app (logging.getLogger(__name__))
LOGGER_NAME = "backend.itq_utils_app"
LOG_FILE_NAME = "itq_utils.log"

def setup_service_logger(log_dir: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configures the service logger.
    Always logs to the console; when log_dir is given, also writes
    <log_dir>/itq_utils.log, keeping up to 5 backups of 1 MB each.
    Safe to call more than once: handlers are replaced, not stacked.
    """
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, LOG_FILE_NAME)

        # Create a rotating file handler(1 MB per file, 5 backups)
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger
