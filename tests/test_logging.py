from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from exception_filters.core.config import Settings
from exception_filters.core.context import bind_request_id, reset_request_id
from exception_filters.core.logging import configure_logging


@pytest.fixture()
def captured_root_stream() -> Iterator[io.StringIO]:
    buffer = io.StringIO()
    yield buffer


def _swap_root_stream(buffer: io.StringIO) -> tuple[logging.StreamHandler, object]:
    root_logger = logging.getLogger()
    handler = next(
        (h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)),
        None,
    )
    assert handler is not None, "Expected a stream handler on the root logger"
    return handler, handler.setStream(buffer)


def test_configure_logging_outputs_json_with_request_id(captured_root_stream: io.StringIO) -> None:
    settings = Settings(environment="test", log_level="INFO")
    configure_logging(settings)
    handler, previous_stream = _swap_root_stream(captured_root_stream)

    token = bind_request_id("req-json-1")
    try:
        logger = logging.getLogger("exception_filters.tests.logging")
        logger.info("structured log event", extra={"component": "unit-test"})
    finally:
        handler.flush()
        reset_request_id(token)
        handler.setStream(previous_stream)

    log_lines = captured_root_stream.getvalue().strip().splitlines()
    assert log_lines, "Expected structured log line to be captured"
    payload = json.loads(log_lines[-1])

    assert payload["message"] == "structured log event"
    assert payload["request_id"] == "req-json-1"
    assert payload["environment"] == "test"
    assert payload["level"] == "INFO"
    assert payload["component"] == "unit-test"
    assert payload["service"] == settings.project_name


def test_json_formatter_includes_exception_text(captured_root_stream: io.StringIO) -> None:
    configure_logging(Settings(environment="ci"))
    handler, previous_stream = _swap_root_stream(captured_root_stream)

    try:
        try:
            raise ValueError("bad value")
        except ValueError:
            logging.getLogger("exception_filters.tests.logging").exception("failed")
    finally:
        handler.flush()
        handler.setStream(previous_stream)

    payload = json.loads(captured_root_stream.getvalue().strip().splitlines()[-1])
    assert payload["level"] == "ERROR"
    assert payload["request_id"] == "-"
    assert "ValueError: bad value" in payload["exception"]


def test_plain_format_renders_request_id(captured_root_stream: io.StringIO) -> None:
    configure_logging(Settings(environment="development", log_level="INFO"))
    handler, previous_stream = _swap_root_stream(captured_root_stream)

    token = bind_request_id("req-plain-1")
    try:
        logging.getLogger("exception_filters.tests.logging").warning("plain event")
    finally:
        handler.flush()
        reset_request_id(token)
        handler.setStream(previous_stream)

    line = captured_root_stream.getvalue().strip().splitlines()[-1]
    assert "| WARNING  |" in line
    assert "| req-plain-1 |" in line
    assert line.endswith("plain event")


def test_translation_fields_are_grouped_under_error(captured_root_stream: io.StringIO) -> None:
    configure_logging(Settings(environment="ci"))
    handler, previous_stream = _swap_root_stream(captured_root_stream)

    try:
        logging.getLogger("exception_filters.chain").warning(
            "Exception translated by filter",
            extra={
                "code": "DUPLICATE_ENTRY",
                "status_code": 409,
                "filter": "DataAccessExceptionFilter",
                "exception_type": "IntegrityError",
                "component": "unit-test",
            },
        )
    finally:
        handler.flush()
        handler.setStream(previous_stream)

    payload = json.loads(captured_root_stream.getvalue().strip().splitlines()[-1])
    assert payload["error"] == {
        "code": "DUPLICATE_ENTRY",
        "status_code": 409,
        "filter": "DataAccessExceptionFilter",
        "exception_type": "IntegrityError",
    }
    assert payload["component"] == "unit-test"
    assert "code" not in payload
    assert "lineno" not in payload
