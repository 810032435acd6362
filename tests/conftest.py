import pytest
from loguru import logger

from word_bag.application.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    # each test starts from uncached settings and ends with no sinks pointing at captured streams
    get_settings.cache_clear()
    yield
    logger.remove()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
