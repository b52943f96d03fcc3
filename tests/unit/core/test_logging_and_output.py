"""
Unit tests for logging setup and terminal output helpers.

Author: Daniel Edge
"""

import logging

import pytest

from quality_framework.core.logging_config import get_logger, setup_logging
from quality_framework.core.pretty_output import PrettyOutput


@pytest.fixture
def restore_package_logger():
    root = logging.getLogger("quality_framework")
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:
    """Test package logger configuration."""

    def test_level_by_name(self, restore_package_logger):
        root = setup_logging("debug")
        assert root.name == "quality_framework"
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, restore_package_logger):
        assert setup_logging("chatty").level == logging.WARNING

    def test_repeated_calls_do_not_duplicate_handlers(self, restore_package_logger):
        setup_logging("INFO")
        root = setup_logging("INFO")
        assert len(root.handlers) == 1

    def test_log_file(self, restore_package_logger, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging("INFO", log_file=str(log_file))

        get_logger("quality_framework.profiler.engine").info("analysis started")
        for handler in logging.getLogger("quality_framework").handlers:
            handler.flush()

        assert "analysis started" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
class TestPrettyOutput:
    """Test terminal rendering helpers."""

    @pytest.mark.parametrize("score", [0, 55, 75, 98, 100])
    def test_quality_indicator(self, score):
        bar = PrettyOutput.quality_indicator(score, width=10)
        assert bar.endswith(f"{score}%")
        assert bar.count("█") == score // 10

    def test_compact_table(self, capsys):
        PrettyOutput.compact_table(["Column", "Type"], [("id", "numeric"), ("city", "categorical")])
        output = capsys.readouterr().out
        assert "Column" in output
        assert "categorical" in output

    def test_compact_table_without_rows(self, capsys):
        PrettyOutput.compact_table(["a", "b"], [])
        assert "a" in capsys.readouterr().out

    def test_analysis_summary(self, capsys):
        PrettyOutput.analysis_summary(rows=1200, cols=4, quality=87, duplicate_rows=3, duration=0.25)
        output = capsys.readouterr().out
        assert "1,200" in output
        assert "87%" in output
        assert "0.2s" in output or "0.3s" in output
