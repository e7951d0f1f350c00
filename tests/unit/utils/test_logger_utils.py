import logging

import pytest

from config.settings import settings
from utils.logger_utils import FORMATTER, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler.formatter is FORMATTER:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_configure_logging_with_file(tmp_path):
    log_file = tmp_path / "client.log"
    configure_logging(filename=str(log_file), log_level="debug")

    get_logger("DAO Client Methods").debug("created")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("web3").level == logging.WARNING
    assert "DAO Client Methods - [DEBUG] - created" in log_file.read_text()


def test_unknown_level_falls_back_to_info():
    configure_logging(log_level="chatty")
    assert logging.getLogger().level == logging.INFO
    assert len(logging.getLogger().handlers) == 1


def test_debug_setting_drives_the_default_level(monkeypatch):
    monkeypatch.setattr(settings.app, "debug", True)
    monkeypatch.setattr(settings.app, "log_file", None)
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG
