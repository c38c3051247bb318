"""
Default configuration values for Webpack Config Builder.

Every constant the builder writes into a configuration tree lives here so a
caller can override it through ``ConfigurationBuilder(settings=...)``.
"""

import os

DEFAULT_CONFIG = {
    "environment": {
        "variable": "NODE_ENV",
        "default": "development",
        "production_value": "production",
    },
    "loader": {
        # Conventional dependency directory, never run through loaders
        "exclude_pattern": r"/node_modules",
    },
    "externals": {
        "module_type": "commonjs",
    },
    "output": {
        "filename": "[name].js",
        "hashed_filename": "[chunkhash].[name].js",
    },
    "development": {
        "devtool": "source-map",
        "pathinfo": True,
    },
    "production": {
        "uglify": {
            "comments": False,
            "compress": {"warnings": False},
            "minimize": True,
        },
        "define_key": "process.env.NODE_ENV",
    },
    "vendor": {
        "entry_name": "vendor",
        "chunk_names": ["vendor", "manifest"],
    },
    "dev_server": {
        "overlay": True,
        "hook_key": "after",
        "log_prefix": "webpack-dev-middleware: proxy:",
    },
    "proxy": {
        "secure": True,
        "timeout": 30,
    },
    "logging": {
        "level": "INFO",  # "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "console_enabled": True,
        "file_enabled": False,
        "file_path": os.path.join(os.getcwd(), "webpack_config_builder.log"),
    },
}
