"""
File system utilities for Webpack Config Builder.
"""

import glob
import logging
import os
import re
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


class FileUtils:
    """Utility functions for resolving source files into entry points."""

    @staticmethod
    def arrify(value) -> list:
        """
        Normalize a value into a list.

        ``None`` becomes an empty list, a list or tuple is copied, anything
        else (including a string) is wrapped.
        """
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    @staticmethod
    def flatten_args(args: Iterable) -> list:
        """Flatten variadic arguments so ``f('a', 'b')`` and ``f(['a', 'b'])`` agree."""
        flat = []
        for arg in args:
            flat.extend(FileUtils.arrify(arg))
        return flat

    @staticmethod
    def expand_globs(patterns: Iterable[str], cwd: Optional[str] = None) -> List[str]:
        """
        Expand glob patterns into a sorted list of absolute file paths.

        Args:
            patterns: Glob patterns; ``**`` matches any number of directories
                and a leading ``!`` turns a pattern into an exclusion
            cwd: Directory relative patterns are evaluated against
                (defaults to the current working directory)

        Returns:
            Sorted, de-duplicated absolute paths of regular files
        """
        cwd = os.path.abspath(cwd or os.getcwd())
        included = set()
        excluded = set()

        for pattern in patterns:
            target = included
            if pattern.startswith('!'):
                target = excluded
                pattern = pattern[1:]

            # cwd is a literal directory, not part of the pattern
            full_pattern = os.path.join(glob.escape(cwd), pattern)
            for match in glob.glob(full_pattern, recursive=True):
                if os.path.isfile(match):
                    target.add(os.path.abspath(match))

        files = sorted(included - excluded)
        logger.debug(f"Expanded {list(patterns)} in {cwd} to {len(files)} file(s)")
        return files

    @staticmethod
    def common_dir(files: List[str]) -> str:
        """
        Get the deepest directory containing every file.

        A single file yields its parent directory.

        Raises:
            ValueError: If ``files`` is empty
        """
        if not files:
            raise ValueError("common_dir() needs at least one path")
        if len(files) == 1:
            return os.path.dirname(files[0])
        return os.path.commonpath(files)

    @staticmethod
    def strip_extension(file_path: str) -> str:
        """Remove the file extension, e.g. ``pages/home.js`` -> ``pages/home``."""
        return os.path.splitext(file_path)[0]

    @staticmethod
    def entry_name(base: str, file_path: str) -> str:
        """Derive a module name from a file path relative to ``base``."""
        relative = os.path.relpath(file_path, base)
        # Entry names are URL-ish, keep them stable across platforms
        return FileUtils.strip_extension(relative).replace(os.sep, '/')

    @staticmethod
    def extension_pattern(extensions: Iterable[str]) -> 're.Pattern':
        """
        Compile a regex matching any of the extensions at end of string.

        Args:
            extensions: Literal suffixes such as ``.js`` or ``.tsx``

        Returns:
            Compiled ``(ext1|ext2)$`` pattern with each literal escaped
        """
        alternatives = '|'.join(re.escape(ext) for ext in extensions)
        return re.compile(f"({alternatives})$")
