"""
Core components for Webpack Config Builder.

This module contains the configuration builder, the deep merge it is built
on, and the callables and plugin descriptors it places in a configuration.
"""

from .builder import ConfigurationBuilder, builder
from .dev_server import DevServerHook, HttpxReverseProxy, ReverseProxy
from .externals import ExternalsResolver
from .merge import ValueKind, deep_merge, value_kind
from .plugins import CommonsChunkPlugin, DefinePlugin, ManifestPlugin, Plugin, UglifyJsPlugin

__all__ = [
    "ConfigurationBuilder",
    "builder",
    "DevServerHook",
    "HttpxReverseProxy",
    "ReverseProxy",
    "ExternalsResolver",
    "ValueKind",
    "deep_merge",
    "value_kind",
    "Plugin",
    "UglifyJsPlugin",
    "DefinePlugin",
    "CommonsChunkPlugin",
    "ManifestPlugin",
]
