"""Pytest fixtures and config."""


import pytest

_ENV_VARS = (
    "ICONKIT_OUTPUT_DIR",
    "ICONKIT_ENV_PREFIX",
    "ICONKIT_COMPRESSION_LEVEL",
    "LOG_LEVEL",
    "LOG_USE_JSON",
    "PALETTE_TOP",
    "PALETTE_BOTTOM",
    "PALETTE_INK",
    "PALETTE_ACCENT",
)


@pytest.fixture(autouse=True)
def env_cleanup(monkeypatch):
    """Avoid picking up the developer's environment in tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
