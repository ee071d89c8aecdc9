import logging

import pytest

from solid_city.infrastructure.console import BufferedConsole


@pytest.fixture
def console():
    """In-memory console that records every line written to it."""
    return BufferedConsole()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables out of every test."""
    monkeypatch.delenv("SOLID_CITY_CONFIG", raising=False)
    monkeypatch.delenv("SOLID_CITY_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_solid_city_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
