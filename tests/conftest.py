"""Pytest fixtures for django-asset-dumper tests."""

from io import StringIO
from unittest import mock

import pytest
from django.core.management.base import OutputWrapper
from django.core.management.color import no_style

from django_asset_dumper.assets import AssetCollection, StringAsset
from django_asset_dumper.dumper import AssetDumper
from django_asset_dumper.manager import Formula


@pytest.fixture
def stdout():
    """Progress output captured in memory."""
    return OutputWrapper(StringIO())


@pytest.fixture
def stderr():
    """Error output captured in memory."""
    return OutputWrapper(StringIO())


@pytest.fixture
def make_formula():
    """Factory for formulae with an optional debug override."""

    def _make(debug=None, inputs=None, filters=None, output=None, vars=()):
        return Formula(
            inputs=list(inputs or []),
            filters=list(filters or []),
            options={"output": output, "vars": list(vars), "debug": debug},
        )

    return _make


@pytest.fixture
def mock_manager():
    """Mock asset manager delegating last-modified to the asset."""
    manager = mock.Mock()
    manager.is_debug.return_value = False
    manager.get_last_modified.side_effect = lambda asset: asset.get_last_modified()
    return manager


@pytest.fixture
def make_dumper(mock_manager, stdout, stderr):
    """Factory for a dumper writing below ``write_to``."""

    def _make(write_to, variables=None, verbosity=1, manager=None):
        return AssetDumper(
            manager or mock_manager,
            str(write_to),
            variables or {},
            stdout=stdout,
            stderr=stderr,
            style=no_style(),
            verbosity=verbosity,
        )

    return _make


@pytest.fixture
def css_collection():
    """Collection of two in-memory CSS leaves with a known source path."""
    leaves = [
        StringAsset(
            "a { color: red; }",
            last_modified=100,
            source_root="/src",
            source_path="css/a.css",
            target_path="css/app_part_1.css",
        ),
        StringAsset(
            "b { color: blue; }",
            last_modified=200,
            source_root="/src",
            source_path="css/b.css",
            target_path="css/app_part_2.css",
        ),
    ]
    return AssetCollection(leaves, target_path="css/app.css")
