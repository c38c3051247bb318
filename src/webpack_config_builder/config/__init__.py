"""
Configuration module for Webpack Config Builder.

Holds the defaults every builder starts from and the build-mode lookup.
"""

from .defaults import DEFAULT_CONFIG
from .environment import get_node_env, is_production

__all__ = [
    "DEFAULT_CONFIG",
    "get_node_env",
    "is_production",
]
