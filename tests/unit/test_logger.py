import importlib
import logging

import pytest

import pluscodes
from pluscodes.logger import configure_logging, get_logger, parse_log_level, rotate_log_file


@pytest.fixture()
def package_logger():
    logger = logging.getLogger("pluscodes")
    level = logger.level
    handlers = list(logger.handlers)

    yield logger

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def test_parse_log_level():
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level("DEBUG") == logging.DEBUG
    assert parse_log_level("WARNING") == logging.WARNING


def test_parse_log_level_invalid(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_log_level("LOUD") == logging.INFO

    assert "LOG_LEVEL=LOUD is not a valid log level" in caplog.text


def test_rotate_log_file(tmp_path):
    log_file = tmp_path / "pluscodes.log"

    # nothing to rotate
    assert rotate_log_file(str(log_file)) is None

    log_file.write_text("first")
    assert rotate_log_file(str(log_file)) == tmp_path / "000.pluscodes.log"
    assert not log_file.exists()

    log_file.write_text("second")
    assert rotate_log_file(str(log_file)) == tmp_path / "001.pluscodes.log"
    assert (tmp_path / "000.pluscodes.log").read_text() == "first"
    assert (tmp_path / "001.pluscodes.log").read_text() == "second"


def test_get_logger():
    logger = get_logger("pluscodes.test")

    assert logger.name == "pluscodes.test"
    assert isinstance(logger, logging.Logger)


def test_import_leaves_log_file_alone(tmp_path, monkeypatch):
    log_file = tmp_path / "pluscodes.log"
    log_file.write_text("previous run")
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    for name in ("pluscodes.logger", "pluscodes.encode", "pluscodes.shorten", "pluscodes"):
        importlib.reload(importlib.import_module(name))

    assert log_file.read_text() == "previous run"
    assert list(tmp_path.iterdir()) == [log_file]
    assert not logging.getLogger("pluscodes").handlers


def test_configure_logging(tmp_path, monkeypatch, package_logger):
    log_file = tmp_path / "pluscodes.log"
    log_file.write_text("previous run")
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert configure_logging() == (logging.DEBUG, str(log_file))

    assert (tmp_path / "000.pluscodes.log").read_text() == "previous run"
    assert package_logger.level == logging.DEBUG

    file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)

    pluscodes.encode(47.0000625, 8.0000625)
    file_handlers[0].flush()
    assert "Encoding (47.0000625, 8.0000625)" in log_file.read_text()


def test_configure_logging_without_file(monkeypatch, package_logger):
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert configure_logging() == (logging.INFO, None)
    assert package_logger.level == logging.INFO
    assert not package_logger.handlers
