"""
Tests for configuration defaults, build-mode lookup and logging setup.
"""

import logging

import pytest

from webpack_config_builder.config import DEFAULT_CONFIG, get_node_env, is_production
from webpack_config_builder.core.builder import ConfigurationBuilder
from webpack_config_builder.utils.logging_utils import setup_logging


class TestSettings:
    """Test builder settings on top of defaults."""

    def test_default_settings(self):
        """Test a builder starts from DEFAULT_CONFIG."""
        b = ConfigurationBuilder()
        assert b.settings == DEFAULT_CONFIG
        assert b.settings is not DEFAULT_CONFIG

    def test_get_with_dot_notation(self):
        """Test getting settings with dot notation."""
        b = ConfigurationBuilder()
        assert b.get_setting('development.devtool') == 'source-map'
        assert b.get_setting('vendor.chunk_names') == ['vendor', 'manifest']

        # Test non-existing keys
        assert b.get_setting('nonexistent.key') is None
        assert b.get_setting('nonexistent.key', 'default') == 'default'

    def test_cascading_settings(self):
        """Test overrides merge into defaults without touching them."""
        b = ConfigurationBuilder(settings={
            'development': {'devtool': 'eval'},
            'output': {'filename': '[name].bundle.js'},
        })
        assert b.get_setting('development.devtool') == 'eval'
        assert b.get_setting('development.pathinfo') is True
        assert b.get_setting('output.filename') == '[name].bundle.js'
        assert DEFAULT_CONFIG['development']['devtool'] == 'source-map'

        config = b.development(True).dest('dist', False).build()
        assert config['devtool'] == 'eval'
        assert config['output']['filename'] == '[name].bundle.js'

    def test_settings_drive_emitted_values(self):
        """Test emitted constants come from settings rather than inline literals."""
        b = ConfigurationBuilder(settings={
            'dev_server': {'hook_key': 'setup', 'overlay': False},
            'vendor': {'entry_name': 'libs'},
            'externals': {'module_type': 'umd'},
        })
        config = b.dev_server().vendor('react').externals('react').build()

        assert 'setup' in config['devServer']
        assert 'after' not in config['devServer']
        assert config['devServer']['overlay'] is False
        assert config['entry'] == {'libs': ['react']}
        assert config['externals'].module_type == 'umd'


class TestEnvironment:
    """Test NODE_ENV lookup."""

    def test_default_mode(self, monkeypatch):
        """Test the default applies when NODE_ENV is unset or empty."""
        monkeypatch.delenv('NODE_ENV', raising=False)
        assert get_node_env() == 'development'
        monkeypatch.setenv('NODE_ENV', '')
        assert get_node_env() == 'development'

    def test_mode_from_variable(self, monkeypatch):
        """Test NODE_ENV is read."""
        monkeypatch.setenv('NODE_ENV', 'production')
        assert get_node_env() == 'production'

    def test_custom_variable(self, monkeypatch):
        """Test the variable name comes from settings."""
        monkeypatch.setenv('BUILD_MODE', 'production')
        settings = ConfigurationBuilder(settings={'environment': {'variable': 'BUILD_MODE'}}).settings
        assert get_node_env(settings) == 'production'

    def test_is_production(self):
        """Test production detection."""
        assert is_production('production')
        assert not is_production('development')
        assert not is_production('staging')


class TestLogging:
    """Test logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def test_file_logging(self, tmp_path):
        """Test a log file is created when a path is given."""
        log_path = tmp_path / 'logs' / 'build.log'
        setup_logging('debug', str(log_path))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger('webpack_config_builder.test').debug("written")
        for handler in root.handlers:
            handler.flush()
        assert "written" in log_path.read_text()

    def test_unknown_level(self):
        """Test an unknown level name is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging('LOUD')
