"""
Externals predicate for keeping dependencies out of a bundle.
"""

import logging
import os
import re
from typing import Callable, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

_FILE_REQUEST = re.compile(r'^(?:\.\.?|/)')
# Optional loader prefix ("style!css!"), then a possibly scoped package name
_PACKAGE_REQUEST = re.compile(r'^(?:.*!)?((?:@[^/]+/)?[^/]+)')


class ExternalsResolver:
    """
    Callable consulted by the bundler for every module request.

    Requests that resolve to one of ``deps_or_files`` are reported as
    ``"<module_type> <request>"``; anything else is left to normal resolution.
    """

    def __init__(self, deps_or_files: Union[str, Iterable[str]], module_type: str = 'commonjs'):
        if isinstance(deps_or_files, str):
            deps_or_files = [deps_or_files]
        self.deps_or_files: List[str] = list(deps_or_files)
        self.module_type = module_type

    def resolve_name(self, context: Optional[str], request: str) -> Optional[str]:
        """
        Reduce a request to the identifier compared against the list.

        Relative and absolute requests become absolute file paths resolved
        against ``context``; package requests become the package name.
        """
        module = request
        if module.startswith('@'):
            segments = module.split('/')
            module = segments[1] if len(segments) > 1 else ''

        if _FILE_REQUEST.match(module):
            return os.path.abspath(os.path.join(context or os.getcwd(), module))

        match = _PACKAGE_REQUEST.match(request)
        return match.group(1) if match else None

    def __call__(self, context: Optional[str], request: str, callback: Callable):
        module = self.resolve_name(context, request)
        if module is not None and module in self.deps_or_files:
            logger.debug(f"Treating {request} as external ({self.module_type})")
            return callback(None, f"{self.module_type} {request}")
        return callback()

    def __repr__(self):
        return f"ExternalsResolver({self.deps_or_files!r}, module_type={self.module_type!r})"
