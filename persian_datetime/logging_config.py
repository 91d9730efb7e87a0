import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from persian_datetime.config import Settings, settings as default_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Configures logging for applications embedding the library.

    The package itself only creates module loggers; handlers are installed
    here, on the root logger, when the host application asks for them.
    """
    config = config or default_settings
    numeric_level = getattr(logging, config.LOG_LEVEL.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {config.LOG_LEVEL}')

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Rotating File Handler
    if config.LOG_FILE_PATH:
        log_dir = os.path.dirname(config.LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.LOG_FILE_PATH,
            maxBytes=config.LOG_FILE_MAX_BYTES,
            backupCount=config.LOG_FILE_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging configured: Level=%s, Path=%s", config.LOG_LEVEL, config.LOG_FILE_PATH)
    return logger
