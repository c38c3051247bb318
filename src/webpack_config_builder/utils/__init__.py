"""
Utility modules for Webpack Config Builder.
"""

from .file_utils import FileUtils
from .logging_utils import setup_logging

__all__ = [
    "FileUtils",
    "setup_logging",
]
