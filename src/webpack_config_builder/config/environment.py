"""
Build-mode lookup for Webpack Config Builder.
"""

import logging
import os
from typing import Any, Dict, Optional

from .defaults import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def get_node_env(settings: Optional[Dict[str, Any]] = None) -> str:
    """
    Return the current build mode.

    Args:
        settings: Full builder settings; falls back to DEFAULT_CONFIG

    Returns:
        The value of the configured environment variable (``NODE_ENV``),
        or the configured default when it is unset or empty
    """
    env_settings = (settings or DEFAULT_CONFIG).get("environment", DEFAULT_CONFIG["environment"])
    variable = env_settings.get("variable", "NODE_ENV")
    default = env_settings.get("default", "development")

    value = os.environ.get(variable) or default
    logger.debug(f"Resolved {variable}={value}")
    return value


def is_production(node_env: str, settings: Optional[Dict[str, Any]] = None) -> bool:
    """Check whether a mode name denotes a production build."""
    env_settings = (settings or DEFAULT_CONFIG).get("environment", DEFAULT_CONFIG["environment"])
    return node_env == env_settings.get("production_value", "production")
