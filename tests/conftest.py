import os

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep GREENLEEKS_* variables and Loguru handlers from leaking between tests."""
    for key in list(os.environ):
        if key.upper().startswith("GREENLEEKS_"):
            monkeypatch.delenv(key)
    yield
    logger.remove()


@pytest.fixture
def gitconfig_file(tmp_path):
    path = tmp_path / "gitconfig"
    path.write_text(
        "[core]\n"
        "\tautocrlf = input\n"
        "[user]\n"
        "\tname = Ada Lovelace\n"
        "\temail = ada@example.com\n"
    )
    return path


@pytest.fixture
def project_dir(tmp_path):
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "README.md").write_text("# Project\n")
    (root / "src" / "main.py").write_text("print('hello')\n")
    return root


@pytest.fixture
def log_messages():
    """Collect Loguru messages at DEBUG and above."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
