"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
Tests run from the project root so config/settings/*.yaml and the
.project_root marker are the real project files.
"""

import logging
from collections.abc import Generator

import pytest

from appctl.core import logging as logging_module
from appctl.core.config import get_app_config, get_settings


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test a fresh configuration load with no env overrides."""
    monkeypatch.delenv("APPCTL_TARGET", raising=False)
    monkeypatch.delenv("APPCTL_TIMEOUT", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_root_handlers() -> Generator[None, None, None]:
    """Drop handlers setup_logging() attached to streams a test has closed."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
