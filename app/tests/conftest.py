"""
Shared fixtures.
"""

import pytest

from adder.logging_config import reset_logging, set_run_id


@pytest.fixture(autouse=True)
def clean_logging():
    """Each test starts with unconfigured package logging."""
    reset_logging()
    set_run_id(None)
    yield
    reset_logging()
    set_run_id(None)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove ADDER_* variables and run from an empty directory."""
    for key in ("ADDER_OVERFLOW_POLICY", "ADDER_LOG_LEVEL", "ADDER_LOG_JSON", "ADDER_LOG_FILE"):
        # setenv first so teardown also removes values a .env file loaded
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
