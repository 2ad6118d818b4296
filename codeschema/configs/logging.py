"""
codeschema Logging Configuration

Configures logging based on environment variables:
- CODESCHEMA_DEBUG: Enable debug logging (default: false)
- CODESCHEMA_LOG_FILE: Log file path (default: $CODESCHEMA_DATA_PATH/codeschema.log)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from codeschema.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for codeschema.

    Args:
        debug: Enable debug level. Defaults to CODESCHEMA_DEBUG env var.
        log_file: Log file path. Defaults to CODESCHEMA_LOG_FILE env var,
                  or $CODESCHEMA_DATA_PATH/codeschema.log if not set.

    Returns:
        Root logger for codeschema
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("CODESCHEMA_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("CODESCHEMA_LOG_FILE")
        if not log_file:
            log_file = str(get_data_path() / "codeschema.log")

    # Ensure log directory exists
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("codeschema")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # Warnings and above go to stderr; everything at `level` goes to the file
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
    logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "ast.parser", "ast.extractor")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"codeschema.{component}")
