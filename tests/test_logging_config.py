"""Tests for logging and configuration helpers."""

import json
import logging

import pytest

from repohealth.core.config import AnalyzerConfig
from repohealth.core.logging_config import (
    ROOT_LOGGER_NAME,
    AnalysisLogFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


class TestAnalysisLogFormatter:
    def test_structured_fields(self):
        record = logging.LogRecord(
            "repohealth.analyzer", logging.INFO, __file__, 1, "Analyzed %s", ("o/r",), None
        )
        record.event = "analysis_completed"
        record.owner = "o"
        record.health_score = 62

        entry = json.loads(AnalysisLogFormatter().format(record))

        assert entry["message"] == "Analyzed o/r"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "repohealth.analyzer"
        assert entry["event"] == "analysis_completed"
        assert entry["owner"] == "o"
        assert entry["health_score"] == 62
        assert "path" not in entry


class TestConfigureLogging:
    def test_file_handler(self, restore_logger, tmp_path):
        log_file = tmp_path / "analysis.log"
        logger = configure_logging(log_file=str(log_file), log_level="debug", enable_console=False)

        logging.getLogger("repohealth.key_files").warning(
            "Could not fetch key file", extra={"path": "package.json"}
        )
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert entry["path"] == "package.json"

    def test_handlers_replaced(self, restore_logger):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1
        assert get_logger() is logger


class TestAnalyzerConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        config = AnalyzerConfig.from_env()
        assert config.github_token is None
        assert config.max_file_size == 100_000

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        assert AnalyzerConfig.from_env().github_token == "ghp_test"

    def test_rejects_zero_concurrency(self):
        with pytest.raises(ValueError):
            AnalyzerConfig(max_concurrency=0)
