"""Logging configuration for cssbuilder."""

import logging
from datetime import datetime
from pathlib import Path

from cssbuilder.utils.files import get_logs_path, init_cssbuilder

HANDLER_NAME = 'cssbuilder-file'


def setup_local_logging(level: str = 'DEBUG') -> Path:
    """Set up local file-based logging.

    Creates a log file in .cssbuilder/logs/ and configures the root logger
    to write to it. Console output is left to the CLI's rich console.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', or 'ALL'). Defaults to 'DEBUG'.

    Returns:
        Path: The path to the created log file.

    """
    init_cssbuilder()
    logs_dir = get_logs_path()

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = logs_dir / f'run_{timestamp}.log'

    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace the handler from a previous call instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file)
    file_handler.set_name(HANDLER_NAME)
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)

    return log_file
