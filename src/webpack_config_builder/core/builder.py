"""
Configuration builder for Webpack Config Builder.

Accumulates a webpack configuration through chained calls:

    config = (
        builder()
        .src('src/*.js')
        .dest('dist')
        .loader(['.js', '.jsx'], 'babel-loader')
        .build()
    )
"""

import json
import logging
import os
import re
from typing import Any, Callable, Dict, Optional

from ..config.defaults import DEFAULT_CONFIG
from ..config.environment import get_node_env, is_production
from ..utils.file_utils import FileUtils
from .dev_server import DevServerHook, HttpxReverseProxy, ReverseProxy
from .externals import ExternalsResolver
from .merge import deep_merge
from .plugins import CommonsChunkPlugin, DefinePlugin, Plugin, UglifyJsPlugin


logger = logging.getLogger(__name__)


class ConfigurationBuilder:
    """Builds a webpack configuration tree through chainable calls."""

    def __init__(
        self,
        settings: Optional[Dict[str, Any]] = None,
        manifest_plugin_factory: Optional[Callable[[], Plugin]] = None,
        proxy_factory: Optional[Callable[[Dict[str, Any]], ReverseProxy]] = HttpxReverseProxy,
    ):
        """
        Args:
            settings: Overrides deep-merged over DEFAULT_CONFIG
            manifest_plugin_factory: Creates a manifest plugin; without it
                output filenames are never fingerprinted
            proxy_factory: Creates the reverse proxy used by ``dev_server``;
                without it proxy options are ignored
        """
        self._cfg: Dict[str, Any] = {}
        self._settings = deep_merge(DEFAULT_CONFIG, settings)
        self.manifest_plugin_factory = manifest_plugin_factory
        self.proxy_factory = proxy_factory

    @property
    def settings(self) -> Dict[str, Any]:
        return self._settings

    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a builder setting using dot notation.

        Args:
            key: Setting key in dot notation (e.g., 'output.filename')
            default: Default value if key not found
        """
        value = self._settings
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def merge(self, *cfgs: Optional[Dict[str, Any]]) -> "ConfigurationBuilder":
        """
        Deep-merge configuration fragments into the held configuration.

        Mappings are merged recursively, lists are concatenated and any other
        value is replaced by the later fragment.

        Example:
            builder().merge({'resolve': {'modules': ['node_modules']}})
        """
        merged = deep_merge(self._cfg, *cfgs)
        # Keep the object handed out by build() current
        self._cfg.clear()
        self._cfg.update(merged)
        logger.debug(f"Merged {len(cfgs)} fragment(s), top-level keys: {sorted(self._cfg)}")
        return self

    def alias(self, aliases: Dict[str, str]) -> "ConfigurationBuilder":
        """
        Define module aliases.

        Example:
            builder().alias({'react': 'inferno-compat', 'react-dom': 'inferno-compat'})
        """
        return self.merge({'resolve': {'alias': aliases}})

    def extensions(self, *ext: str) -> "ConfigurationBuilder":
        """
        Add resolvable extensions (ex: '.jsx', '.css').

        Example:
            builder().extensions('.js', '.jsx', '.ts', '.css', '.less', '.scss')
        """
        return self.merge({'resolve': {'extensions': FileUtils.flatten_args(ext)}})

    def loader(self, ext, loader, query: Optional[Dict[str, Any]] = None) -> "ConfigurationBuilder":
        """
        Add a loader rule.

        Args:
            ext: File extension or list of extensions to match
            loader: Loader name or list of loader names
            query: Loader parameters

        Example:
            builder().loader(['.js', '.jsx'], 'babel-loader', {'presets': ['latest', 'react']})
        """
        rule = {
            'test': FileUtils.extension_pattern(FileUtils.arrify(ext)),
            'loader': loader,
            'exclude': re.compile(self.get_setting('loader.exclude_pattern')),
        }
        if query is not None:
            rule['query'] = query
        return self.merge({'module': {'rules': [rule]}})

    def externals(self, deps_or_files, module_type: Optional[str] = None) -> "ConfigurationBuilder":
        """
        Exclude modules or files from the bundle.

        Files must be given exactly as they are required, e.g. exclude
        ``os.path.abspath('config/index')`` for ``require('./config/index')``.

        Args:
            deps_or_files: Package name, absolute file path, or a list of them
            module_type: How the bundle loads the excluded module at runtime

        Example:
            builder().externals(list(package_json['dependencies']))
        """
        if module_type is None:
            module_type = self.get_setting('externals.module_type')
        return self.merge({'externals': ExternalsResolver(deps_or_files, module_type)})

    def src(self, *globs: str) -> "ConfigurationBuilder":
        """
        Set entries from file globs evaluated against the working directory.

        Each entry is named after its path relative to the common directory
        of all matches, without extension.

        Example:
            builder().src('src/*.js')
        """
        cwd = os.getcwd()
        files = FileUtils.expand_globs(FileUtils.flatten_args(globs), cwd=cwd)

        entry = {}
        if files:
            base = FileUtils.common_dir(files)
            for file in files:
                name = FileUtils.entry_name(base, file)
                if name in entry:
                    logger.warning(f"Entry '{name}' from {file} replaces {entry[name]}")
                entry[name] = file
        else:
            logger.warning(f"No files matched {list(globs)} in {cwd}")

        return self.merge({'entry': entry})

    def dest(self, directory: str, chunkhash: bool = True) -> "ConfigurationBuilder":
        """
        Set the output directory.

        Args:
            directory: Output directory, relative or absolute
            chunkhash: Whether to include [chunkhash] in the filename; only
                honoured when a manifest plugin factory is available

        Example:
            builder().dest('build/public/js', False)
        """
        if chunkhash and self.manifest_plugin_factory is None:
            logger.debug("No manifest plugin available, output filenames will not be hashed")
        chunkhash = chunkhash and self.manifest_plugin_factory is not None
        if chunkhash:
            self.plugins(self.manifest_plugin_factory())

        filename_key = 'output.hashed_filename' if chunkhash else 'output.filename'
        return self.merge({
            'output': {
                'path': os.path.abspath(directory),
                'filename': self.get_setting(filename_key),
            },
        })

    def development(self, enable) -> "ConfigurationBuilder":
        """
        Add source maps and path info when ``enable`` is truthy.

        Example:
            builder().development(os.environ.get('NODE_ENV', 'development') == 'development')
        """
        if not enable:
            return self
        return self.merge({
            'devtool': self.get_setting('development.devtool'),
            'output': {
                'pathinfo': self.get_setting('development.pathinfo'),
            },
        })

    def production(self, enable) -> "ConfigurationBuilder":
        """
        Add minification and the production mode constant when ``enable`` is truthy.

        Example:
            builder().production(os.environ.get('NODE_ENV') == 'production')
        """
        if not enable:
            return self
        production_value = self.get_setting('environment.production_value')
        return self.plugins(
            UglifyJsPlugin(deep_merge(self.get_setting('production.uglify'))),
            DefinePlugin({
                self.get_setting('production.define_key'): json.dumps(production_value),
            }),
        )

    def environment(self, node_env: Optional[str] = None) -> "ConfigurationBuilder":
        """
        Apply development or production settings for a build mode.

        Args:
            node_env: Build mode; defaults to the NODE_ENV environment variable
        """
        if node_env is None:
            node_env = get_node_env(self._settings)
        production = is_production(node_env, self._settings)
        logger.info(f"Configuring {'production' if production else 'development'} build ({node_env})")
        return self.development(not production).production(production)

    def dev_server(self, opts: Optional[Dict[str, Any]] = None) -> "ConfigurationBuilder":
        """
        Turn on the error overlay and an optional reverse proxy.

        A ``proxy`` key in ``opts`` is removed, merged over the ``proxy``
        settings and used to configure the reverse proxy; every other key
        is passed through.

        Example:
            builder().dev_server({
                'publicPath': '/js/',
                'proxy': {'target': 'https://localhost:8443/', 'secure': False},
            })
        """
        opts = dict(opts or {})
        proxy_options = opts.pop('proxy', None)
        if proxy_options is not None:
            # Caller options win over the configured proxy defaults
            proxy_options = deep_merge(self.get_setting('proxy'), proxy_options)
        hook = DevServerHook(
            proxy_options,
            self.proxy_factory,
            log_prefix=self.get_setting('dev_server.log_prefix'),
        )

        dev_server = {
            'overlay': self.get_setting('dev_server.overlay'),
            self.get_setting('dev_server.hook_key'): hook,
        }
        dev_server.update(opts)
        return self.merge({'devServer': dev_server})

    devServer = dev_server

    def plugins(self, *plugins) -> "ConfigurationBuilder":
        """
        Add plugins.

        Example:
            builder().plugins(Plugin1(), Plugin2())
        """
        return self.merge({'plugins': FileUtils.flatten_args(plugins)})

    def vendor(self, *modules: str) -> "ConfigurationBuilder":
        """
        Split the given modules into a shared vendor chunk.

        Example:
            builder().vendor('react', 'react-dom')
        """
        chunk_names = list(self.get_setting('vendor.chunk_names'))
        entry_name = self.get_setting('vendor.entry_name')
        return self.plugins(CommonsChunkPlugin({'names': chunk_names})).merge({
            'entry': {
                entry_name: FileUtils.flatten_args(modules),
            },
        })

    def build(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary (not a copy)."""
        return self._cfg


def builder(**kwargs) -> ConfigurationBuilder:
    """Create a configuration builder; keyword arguments go to ConfigurationBuilder."""
    return ConfigurationBuilder(**kwargs)
