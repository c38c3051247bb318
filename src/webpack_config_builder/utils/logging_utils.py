"""
Logging setup for applications embedding Webpack Config Builder.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config.defaults import DEFAULT_CONFIG


def setup_logging(log_level: Optional[str] = None, log_file_path: Optional[str] = None) -> None:
    """Setup logging with configurable settings from defaults.py."""
    logging_config = DEFAULT_CONFIG.get('logging', {})

    # Use provided parameters or fall back to configuration
    if log_level is None:
        log_level = logging_config.get('level', 'INFO')
    file_enabled = logging_config.get('file_enabled', False) or log_file_path is not None
    if log_file_path is None:
        log_file_path = logging_config.get('file_path', 'webpack_config_builder.log')
    console_enabled = logging_config.get('console_enabled', True)

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    handlers = []
    if console_enabled:
        handlers.append(logging.StreamHandler(sys.stderr))
    if file_enabled:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path)))

    # Fallback to console if no handlers enabled
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=level,
        format=logging_config.get('format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        handlers=handlers,
        force=True,
    )
