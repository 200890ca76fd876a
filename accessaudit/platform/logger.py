import logging
import os
from logging.handlers import RotatingFileHandler

from accessaudit.platform.config import get_settings


def get_logger(name: str):
    """
    Creates a logger instance that writes to console AND a file.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    # Root handlers from basicConfig would print every record twice
    logger.propagate = False

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    settings = get_settings()
    if settings.LOG_TO_FILE:
        log_dir = os.path.join(os.getcwd(), settings.LOG_DIR)
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, "accessaudit.log")

        file_handler = RotatingFileHandler(log_file_path, maxBytes=10_000_000, backupCount=5)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    return logger
