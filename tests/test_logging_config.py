"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest

from variant_diff.api import compare_trees, suggest_mappings
from variant_diff.logging_config import configure_logging, get_logger


class TestConfigureLogging:
    def test_json_logs_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO", json_logs=True)
        get_logger("variant_diff.test").info("scored pairs", pairs=4)
        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "scored pairs"
        assert record["pairs"] == 4
        assert record["level"] == "info"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING", json_logs=True)
        get_logger("variant_diff.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_root_level_set(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("CHATTY")
        assert logging.getLogger().level == logging.INFO


class TestUnconfigured:
    def test_logger_wraps_stdlib_logger(self) -> None:
        logger = get_logger("variant_diff.test")
        assert logger.bind()._logger is logging.getLogger("variant_diff.test")

    def test_library_calls_write_nothing_to_stdout(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        suggestions = suggest_mappings(
            {"A.java": "class A {}"}, {"B.java": "class A {}"}, "V2"
        )
        compare_trees({"a.txt": "x\n"}, [("V2", {"a.txt": "y\n"})])
        assert len(suggestions) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "scored rename candidates" not in captured.err
