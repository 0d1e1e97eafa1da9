"""Tests for the loguru setup."""
import pytest
from loguru import logger

from semester_planner.logger import setup_logger


@pytest.fixture(autouse=True)
def detach_sinks():
    yield
    logger.remove()


def test_file_sink_uses_given_format(tmp_path) -> None:
    log_file = tmp_path / "logs" / "planner.log"

    setup_logger(level="INFO", log_file=str(log_file), file_format="{level} | {message}", compression=None)
    logger.debug("hidden")
    logger.warning("Dropping event: missing date")
    logger.remove()

    assert log_file.read_text(encoding="utf-8").splitlines() == ["WARNING | Dropping event: missing date"]


def test_console_only_without_log_file(tmp_path, capsys) -> None:
    setup_logger(level="DEBUG", console_format="{level}:{message}")
    logger.info("planned")

    assert "INFO:planned" in capsys.readouterr().err
