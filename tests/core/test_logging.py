from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from triviabank.core.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_structlog_defaults():
    yield
    structlog.reset_defaults()
    logging.basicConfig(force=True)


def test_configure_logging_renders_json_events() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    structlog.get_logger("triviabank.tests").info("question_catalog_loaded", questions_total=3)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "question_catalog_loaded"
    assert record["questions_total"] == 3
    assert record["level"] == "info"
    assert record["logger"] == "triviabank.tests"
    assert "timestamp" in record


def test_configure_logging_falls_back_to_info_for_unknown_level() -> None:
    configure_logging("chatty", stream=io.StringIO())

    assert logging.getLogger().level == logging.INFO
