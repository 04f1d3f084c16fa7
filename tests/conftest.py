import pytest
from loguru import logger

from pantheon import logging_utils


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()
    logging_utils._CONFIGURED_LEVEL = None


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PANTHEON_EXECUTABLE", raising=False)
    monkeypatch.delenv("PANTHEON_LOG_LEVEL", raising=False)
