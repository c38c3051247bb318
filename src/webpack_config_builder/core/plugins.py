"""
Plugin descriptors placed in the ``plugins`` list of a configuration tree.

The bundler instantiates the real plugin named by ``constructor`` with
``options`` as its single argument.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict


@dataclass
class Plugin:
    """A bundler plugin instance described as data."""
    options: Dict[str, Any] = field(default_factory=dict)

    constructor: ClassVar[str] = ""

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass
class UglifyJsPlugin(Plugin):
    """Minifies emitted code."""
    constructor: ClassVar[str] = "webpack.optimize.UglifyJsPlugin"


@dataclass
class DefinePlugin(Plugin):
    """Replaces free identifiers with compile-time constants."""
    constructor: ClassVar[str] = "webpack.DefinePlugin"


@dataclass
class CommonsChunkPlugin(Plugin):
    """Extracts modules shared between entries into named chunks."""
    constructor: ClassVar[str] = "webpack.optimize.CommonsChunkPlugin"


@dataclass
class ManifestPlugin(Plugin):
    """Writes a manifest mapping entry names to fingerprinted files."""
    constructor: ClassVar[str] = "webpack-manifest-plugin"
