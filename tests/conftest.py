import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def cliargs_env(monkeypatch: pytest.MonkeyPatch):
    """Pin the settings so a local .env does not leak into the tests."""
    monkeypatch.setenv("CLIARGS_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("CLIARGS_OUTPUT_FORMAT", "table")
    monkeypatch.setenv("CLIARGS_STRICT", "false")
    monkeypatch.delenv("CLIARGS_LOG_FILE", raising=False)
    yield
    logger.remove()
    logger.disable("cliargs")
