"""
Centralized logging configuration
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
import os

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_FORMAT_DETAILED = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Platforms whose disks are ephemeral; presence of any of these means stdout only
CLOUD_ENV_VARS = ('RENDER', 'HEROKU', 'RAILWAY', 'FLY')


def _is_cloud() -> bool:
    return any(os.getenv(var) for var in CLOUD_ENV_VARS)


def _rotating_handler(path: Path, level: int) -> RotatingFileHandler:
    """Size-rotated file handler, LOG_MAX_BYTES x LOG_BACKUP_COUNT"""
    handler = RotatingFileHandler(
        path,
        maxBytes=int(os.getenv('LOG_MAX_BYTES', 10 * 1024 * 1024)),
        backupCount=int(os.getenv('LOG_BACKUP_COUNT', 5)),
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=DATE_FORMAT))
    return handler


def setup_logger(name: str = 'whatsnew', log_level: str = None, log_dir: str = None) -> logging.Logger:
    """
    Setup and configure the service logger

    Console output goes to stdout at INFO. Outside cloud platforms two
    rotating files are added under log_dir: app.log with everything down
    to DEBUG, errors.log with errors only.

    Args:
        name: Logger name
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: LOG_LEVEL env, then INFO)
        log_dir: Directory for log files (default: LOG_DIR env, then 'logs')

    Returns:
        Configured logger instance
    """
    level_name = (log_level or os.getenv('LOG_LEVEL', 'INFO')).upper()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Already configured by an earlier import
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if _is_cloud():
        return logger

    directory = Path(log_dir or os.getenv('LOG_DIR', 'logs'))
    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating_handler(directory / 'app.log', logging.DEBUG))
        logger.addHandler(_rotating_handler(directory / 'errors.log', logging.ERROR))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not create log files in {directory}: {e}. Using console logging only.")

    return logger


# Create default logger instance
logger = setup_logger()
