"""Pytest configuration and shared fixtures"""

import os

import pytest

from namehint.config import Config, get_config
from namehint.lookup import get_suggestion_service

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def sample_candidates():
    """Candidate pool used by the ranking scenarios"""
    return ["getCounter", "processData", "property"]


@pytest.fixture
def module_tree(tmp_path):
    """Directory laid out like a small source tree.

    src/
        main.py
        config.pyi
        utils/
            __init__.py
            helpers.py
            formatting.py
        __pycache__/
        notes.txt
    """
    src = tmp_path / "src"
    utils = src / "utils"
    utils.mkdir(parents=True)
    (src / "__pycache__").mkdir()
    (src / "main.py").write_text("")
    (src / "config.pyi").write_text("")
    (src / "notes.txt").write_text("")
    (utils / "__init__.py").write_text("")
    (utils / "helpers.py").write_text("")
    (utils / "formatting.py").write_text("")
    return src


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset cached Config and SuggestionService between tests"""
    get_config.cache_clear()
    get_suggestion_service.cache_clear()
    yield
    get_config.cache_clear()
    get_suggestion_service.cache_clear()


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears NAMEHINT_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    namehint_vars = {
        key: value for key, value in os.environ.items() if key.startswith("NAMEHINT_")
    }

    # Temporarily remove them
    for key in namehint_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        # Drop variables set by the test, then restore the original ones
        for key in list(os.environ):
            if key.startswith("NAMEHINT_"):
                os.environ.pop(key, None)
        for key, value in namehint_vars.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment.

    This ensures tests can verify default values without environment
    variable interference.
    """
    return Config()
