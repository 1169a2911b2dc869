"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from spark_therapy import config as spark_config
from spark_therapy.navigation import (
    NavigationContainer, RoleNavigatorComposer, SessionRouter, build_default_registry,
)
from spark_therapy.UI.Panes import clear_component_cache


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="spark_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    # Ensure cleanup even if test fails
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(isolated_temp_dir, monkeypatch):
    """Point the config module at a throwaway file so tests never touch ~/.config."""
    config_path = isolated_temp_dir / "config" / "config.toml"
    monkeypatch.setattr(spark_config, "DEFAULT_CONFIG_PATH", config_path)
    monkeypatch.setattr(spark_config, "_CONFIG_CACHE", None)
    yield config_path
    spark_config._CONFIG_CACHE = None


@pytest.fixture(autouse=True)
def reset_component_cache():
    yield
    clear_component_cache()


# ========== Navigation Fixtures ==========

@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def container(registry):
    """A navigation container that hasn't been marked ready yet."""
    return NavigationContainer(RoleNavigatorComposer(registry))


@pytest.fixture
def ready_container(container):
    container.mark_ready("Auth")
    return container


@pytest.fixture
def router(ready_container):
    return SessionRouter(ready_container)


@pytest.fixture
def mock_tree():
    """A NavigationTree stand-in that records calls."""
    tree = MagicMock()
    tree.is_ready.return_value = True
    tree.navigate.return_value = True
    tree.go_back.return_value = True
    return tree
