import logging

import pytest

_ENV_VARS = (
    "APP_CONFIG_FILE",
    "ENDPOINT_FILE",
    "ATTACHMENT_FILE",
    "OUTPUT_FILE",
    "EPG_NAME",
    "FALLBACK_POD",
    "LOG_LEVEL",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
