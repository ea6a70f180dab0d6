"""Logging configuration for the scraper."""

import logging
from datetime import datetime
from pathlib import Path

from salesianos.utils.files import ensure_directory


def setup_local_logging(logs_dir: Path, level: str = 'DEBUG') -> Path:
    """Set up local file-based logging.

    Creates a timestamped log file in logs_dir and configures the root logger
    to write to it. Console output is left to the rich console.

    Args:
        logs_dir: Directory receiving the log file.
        level: Logging level (e.g., 'DEBUG', 'INFO'). Defaults to 'DEBUG'.

    Returns:
        Path: The path to the created log file.

    """
    ensure_directory(logs_dir)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = logs_dir / f'run_{timestamp}.log'

    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(numeric_level)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    return log_file
