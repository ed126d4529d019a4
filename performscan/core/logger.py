import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from performscan.core.config import settings

# Define the log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
formatter = logging.Formatter(LOG_FORMAT)

def setup_logging():
    """Configures the root logger."""

    root_logger = logging.getLogger()

    # Check if handlers are already configured
    if root_logger.hasHandlers():
        return

    root_logger.setLevel(settings.LOG_LEVEL.upper())

    # 1. Console Handler (stderr)
    # stdout is reserved for the call tree report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # 2. Rotating File Handler, only when LOG_FILE is configured
    # 10MB per file, 5 backup files
    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            settings.LOG_FILE, maxBytes=10*1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging configured.")
