# tests/test_logging_utils.py

import logging
import time

import pytest

from flextime.logging_utils import setup_logger


@pytest.fixture
def scratch_logger():
    name = "flextime-scratch"
    yield name
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()


def test_timestamps_are_utc(scratch_logger):
    logger = setup_logger(scratch_logger, "DEBUG")
    fmt = logger.handlers[0].formatter
    assert fmt.converter is time.gmtime

    record = logging.LogRecord(scratch_logger, logging.INFO, __file__, 1, "hi", None, None)
    record.created = 0.0
    record.msecs = 0.0
    assert fmt.format(record).startswith("1970-01-01T00:00:00.000Z INFO")


def test_file_handler(scratch_logger, tmp_path):
    logger = setup_logger(scratch_logger, "INFO", logs_dir=tmp_path / "logs")
    logger.info("written")
    for h in logger.handlers:
        h.flush()
    assert "written" in (tmp_path / "logs" / f"{scratch_logger}.log").read_text(encoding="utf-8")
    assert logger.level == logging.INFO
    assert not logger.propagate
