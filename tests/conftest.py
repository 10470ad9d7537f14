"""
Shared fixtures and configuration for bedazzle tests
"""

import os
import sys
import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from bedazzle import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at a per-test file and drop any cached config"""
    config_file = tmp_path / "config.json5"
    monkeypatch.setenv("BEDAZZLE_CONFIG", str(config_file))
    reset_config()
    yield config_file
    reset_config()


@pytest.fixture
def write_config(isolated_config):
    """Write the test configuration file"""
    def _write(text):
        isolated_config.write_text(text, encoding="utf-8")
        reset_config()
        return isolated_config
    return _write


@pytest.fixture
def rect_decorators():
    """Area and perimeter decorators reading width/height from the state"""
    def with_area(rect, recompose):
        return {"get_area": lambda: rect.width * rect.height}

    def with_perimeter(rect, recompose):
        return {"get_perimeter": lambda: 2 * (rect.width + rect.height)}

    return with_area, with_perimeter


@pytest.fixture
def constant():
    """Build a decorator that ignores its arguments"""
    def _constant(partial):
        def decorator(state, recompose):
            return dict(partial)
        decorator.__qualname__ = f"constant({partial!r})"
        return decorator
    return _constant
