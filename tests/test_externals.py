"""
Tests for the externals predicate.
"""

import os

from webpack_config_builder.core.externals import ExternalsResolver


class Callback:
    """Records how the resolver answered."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


def resolve(resolver, request, context=None):
    callback = Callback()
    resolver(context or os.getcwd(), request, callback)
    assert len(callback.calls) == 1
    return callback.calls[0]


class TestPackageRequests:
    """Test bare package name matching."""

    def test_listed_package_is_external(self):
        """Test a listed package resolves to '<kind> <request>'."""
        resolver = ExternalsResolver(['lodash', 'react'])
        assert resolve(resolver, 'lodash') == (None, 'commonjs lodash')

    def test_unlisted_package_defers(self):
        """Test an unlisted package falls through to normal resolution."""
        resolver = ExternalsResolver(['lodash'])
        assert resolve(resolver, 'underscore') == ()

    def test_sub_path_matches_package(self):
        """Test deep imports keep the full request in the result."""
        resolver = ExternalsResolver('lodash')
        assert resolve(resolver, 'lodash/fp/map') == (None, 'commonjs lodash/fp/map')

    def test_loader_prefix_stripped(self):
        """Test inline loader chains are ignored when matching."""
        resolver = ExternalsResolver(['lodash'])
        request = 'style-loader!css-loader!lodash/index.css'
        assert resolve(resolver, request) == (None, f'commonjs {request}')

    def test_custom_module_type(self):
        """Test the module kind is used as the result prefix."""
        resolver = ExternalsResolver(['jquery'], module_type='var')
        assert resolve(resolver, 'jquery') == (None, 'var jquery')

    def test_empty_request_defers(self):
        """Test a request without a package name defers."""
        resolver = ExternalsResolver([''])
        assert resolve(resolver, '') == ()


class TestScopedRequests:
    """Test @scope/name handling."""

    def test_scoped_package(self):
        """Test scoped packages match with their scope."""
        resolver = ExternalsResolver(['@babel/core'])
        assert resolve(resolver, '@babel/core') == (None, 'commonjs @babel/core')
        assert resolve(resolver, '@babel/core/lib/index') == (None, 'commonjs @babel/core/lib/index')

    def test_scope_alone_does_not_match_name(self):
        """Test the bare name after the scope is not enough."""
        resolver = ExternalsResolver(['core'])
        assert resolve(resolver, '@babel/core') == ()

    def test_bare_scope(self):
        """Test a request consisting of just a scope matches itself."""
        resolver = ExternalsResolver(['@babel'])
        assert resolve(resolver, '@babel') == (None, 'commonjs @babel')

    def test_scoped_dot_segment_is_a_file(self, tmp_path):
        """Test a scope followed by a dot segment resolves as a file."""
        context = str(tmp_path)
        resolver = ExternalsResolver([os.path.join(context, '.hidden')])
        assert resolve(resolver, '@scope/.hidden', context) == (None, 'commonjs @scope/.hidden')


class TestFileRequests:
    """Test absolute file path matching."""

    def test_relative_request_resolved_against_context(self, tmp_path):
        """Test ./ requests are resolved from the requesting directory."""
        context = str(tmp_path / 'src')
        config_file = str(tmp_path / 'src' / 'config' / 'index')
        resolver = ExternalsResolver([config_file])

        assert resolve(resolver, './config/index', context) == (None, 'commonjs ./config/index')
        assert resolve(resolver, './config/index.js', context) == ()

    def test_parent_request(self, tmp_path):
        """Test ../ requests are normalized."""
        context = str(tmp_path / 'src' / 'pages')
        config_file = str(tmp_path / 'src' / 'config')
        resolver = ExternalsResolver([config_file])
        assert resolve(resolver, '../config', context) == (None, 'commonjs ../config')

    def test_absolute_request(self, tmp_path):
        """Test absolute requests are compared as they are."""
        config_file = str(tmp_path / 'config' / 'index')
        resolver = ExternalsResolver([config_file])
        assert resolve(resolver, config_file, '/elsewhere') == (None, f'commonjs {config_file}')

    def test_resolve_name(self, tmp_path):
        """Test the identifier each request is reduced to."""
        resolver = ExternalsResolver([])
        context = str(tmp_path)
        assert resolver.resolve_name(context, './a') == os.path.join(context, 'a')
        assert resolver.resolve_name(context, 'react-dom/server') == 'react-dom'
        assert resolver.resolve_name(context, '@types/node') == '@types/node'
