"""Tests for logging utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

import pytest

from chromatone.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


pytestmark = pytest.mark.usefixtures("restore_root_logger")


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="chromatone.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="resolved %d roles",
        args=(59,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    def test_basic_fields(self) -> None:
        entry = json.loads(StructuredJSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["message"] == "resolved 59 roles"
        assert entry["timestamp"].endswith("+00:00")
        assert entry["context"]["logger_name"] == "chromatone.test"
        assert entry["context"]["line"] == 10

    def test_extra_fields_go_to_context(self) -> None:
        entry = json.loads(StructuredJSONFormatter().format(_record(variant="cmf")))
        assert entry["context"]["variant"] == "cmf"

    def test_private_fields_are_skipped(self) -> None:
        entry = json.loads(StructuredJSONFormatter().format(_record(_hidden=1)))
        assert "_hidden" not in entry["context"]

    def test_exception_details(self) -> None:
        try:
            raise KeyError("spec")
        except KeyError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(StructuredJSONFormatter().format(record))
        assert entry["context"]["error_type"] == "KeyError"
        assert "Traceback" in entry["context"]["stack_trace"]


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_file_output(self, tmp_path: Path) -> None:
        path = tmp_path / "chromatone.jsonl"
        configure_logging(level="INFO", filename=str(path), structured=True)
        logging.getLogger("chromatone.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        line = path.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"


class TestGetLogger:
    def test_plain_logger(self) -> None:
        assert isinstance(get_logger("chromatone.test"), logging.Logger)

    def test_adapter_with_context(self) -> None:
        adapter = get_logger("chromatone.test", variant="vibrant")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"variant": "vibrant"}


class TestLogPerformance:
    def test_returns_result_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        @log_performance
        def add(a: int, b: int) -> int:
            return a + b

        with caplog.at_level(logging.DEBUG, logger="chromatone.core.utils.logging"):
            assert add(2, 3) == 5
        assert any("took" in message for message in caplog.messages)

    def test_preserves_metadata(self) -> None:
        @log_performance
        def resolve() -> None:
            """Docstring."""

        assert resolve.__name__ == "resolve"
        assert resolve.__doc__ == "Docstring."
