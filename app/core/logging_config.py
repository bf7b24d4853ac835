"""
Logging setup for the Job Matcher API.

Console logging is always on; a rotating file is added only when LOG_FILE is set.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx")


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """
    Replace the root handlers with a stdout handler and, optionally, a file.
    
    Args:
        log_level: Logging level name; unknown names fall back to INFO
        log_file: Path of a rotating log file (10MB x 5); None logs to stdout only
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    
    handlers = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=5)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)
    
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        root.addHandler(handler)
    
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
