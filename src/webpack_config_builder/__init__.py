"""
Webpack Config Builder - Fluent builder for webpack configuration trees.

Resolves source globs into entry points, derives output paths, attaches
plugins and deep-merges configuration fragments, then hands the result to
the bundler as a plain dictionary.
"""

from .core import (
    CommonsChunkPlugin,
    ConfigurationBuilder,
    DefinePlugin,
    ManifestPlugin,
    Plugin,
    UglifyJsPlugin,
    builder,
    deep_merge,
)

__version__ = "1.0.0"
__license__ = "MIT"

# Package metadata
__all__ = [
    "__version__",
    "__license__",
    "builder",
    "ConfigurationBuilder",
    "deep_merge",
    "Plugin",
    "UglifyJsPlugin",
    "DefinePlugin",
    "CommonsChunkPlugin",
    "ManifestPlugin",
]
