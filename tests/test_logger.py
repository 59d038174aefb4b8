import logging

import pytest

from utils.logger import get_logger, setup_logger


@pytest.fixture
def fresh_logger_name(request):
    name = f"dailyqr_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logger_writes_file_and_console(tmp_path, fresh_logger_name):
    logger = setup_logger(name=fresh_logger_name, log_dir=str(tmp_path), level="DEBUG")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert list(tmp_path.glob("dailyqr_*.log"))


def test_setup_logger_is_idempotent(tmp_path, fresh_logger_name):
    setup_logger(name=fresh_logger_name, log_dir=str(tmp_path))
    logger = setup_logger(name=fresh_logger_name, log_dir=str(tmp_path))
    assert len(logger.handlers) == 2


@pytest.mark.parametrize("level", ["warning", " Error "])
def test_setup_logger_accepts_level_names_in_any_case(tmp_path, fresh_logger_name, level):
    logger = setup_logger(name=fresh_logger_name, log_dir=str(tmp_path), level=level)
    assert logger.level == logging.getLevelName(level.strip().upper())


def test_unknown_level_falls_back_to_info(tmp_path, fresh_logger_name, caplog):
    logger = setup_logger(name=fresh_logger_name, log_dir=str(tmp_path), level="BOGUS")
    assert logger.level == logging.INFO
    assert "BOGUS" in caplog.text


def test_get_logger_is_child_of_root_logger():
    assert get_logger("storage").name == "dailyqr.storage"
