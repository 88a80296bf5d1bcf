"""
Per-run setup: the run timestamp, the log file and the image output directory.
Log file and image directory are both named after the same timestamp.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = '%(asctime)s %(message)s'
LOG_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'


def make_timestamp(now: datetime = None) -> str:
    """Format a time as <year><MonthName><day>_<HH><MM><SS>, e.g. 2024March5_090703."""
    if now is None:
        now = datetime.now()
    return f"{now.year}{now:%B}{now.day}_{now:%H%M%S}"


def setup_logging(timestamp: str, log_dir: str = "logs", level: str = "INFO",
                  fmt: str = LOG_FORMAT) -> Path:
    """Send all getjpg log output to <log_dir>/<timestamp>.log.

    The log directory must already exist; an OSError is raised otherwise.
    """
    log_path = Path(log_dir) / f"{timestamp}.log"
    handler = logging.FileHandler(log_path, mode='w', encoding='utf-8', errors='backslashreplace')
    handler.setFormatter(logging.Formatter(fmt, datefmt=LOG_DATE_FORMAT))

    package_logger = logging.getLogger("getjpg")
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    package_logger.propagate = False

    print("Output sent to following logfile:")
    print(log_path)
    return log_path


def create_image_dir(image_dir: str, timestamp: str) -> Path:
    """Create <image_dir><timestamp>/ (not recursive, must not exist yet)."""
    path = Path(image_dir + timestamp)
    os.mkdir(path)
    return path
