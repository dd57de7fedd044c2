import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavegen import logging_utils  # noqa: E402


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation timing guardrails")


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep generation logs out of test output and undo per-test log config."""
    saved = dict(logging_utils._settings)
    logging_utils.configure(level="warn", json_mode=False)
    yield
    logging_utils._settings.clear()
    logging_utils._settings.update(saved)


@pytest.fixture(autouse=True)
def _clear_cavegen_env(monkeypatch):
    """Generation env overrides must not leak in from the developer shell."""
    for key in list(os.environ):
        if key.startswith("CAVEGEN_"):
            monkeypatch.delenv(key, raising=False)
    yield
