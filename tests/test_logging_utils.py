import logging

from loguru import logger

from destructure import compile
from destructure import logging_utils
from destructure.logging_utils import InterceptHandler, configure_logging, parse_log_filter


def test_parse_log_filter_global_level() -> None:
    level, filters = parse_log_filter("debug")
    assert level == "debug"
    assert filters == {"": "DEBUG"}


def test_parse_log_filter_modules() -> None:
    level, filters = parse_log_filter("info,destructure.core=trace,destructure.rewrite=false")
    assert level == "info"
    assert filters == {"destructure.core": "TRACE", "destructure.rewrite": False, "": "INFO"}


def test_parse_log_filter_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DESTRUCTURE_LOG_FILTER", "ERROR")
    assert parse_log_filter()[0] == "error"


def test_configure_logging_enables_package_logs(monkeypatch) -> None:
    monkeypatch.setenv("DESTRUCTURE_LOG_FILTER", "debug")
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    configure_logging()

    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    try:
        compile(lambda ctx: [ctx.var("x")])
    finally:
        logger.remove(sink_id)
        logger.disable("destructure")
        monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)

    assert any(message.startswith("pattern.compile ") for message in messages)
    assert any(isinstance(handler, InterceptHandler) for handler in logging.getLogger().handlers)


def test_package_logs_disabled_by_default() -> None:
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    try:
        compile(lambda ctx: {"a": ctx.var("x")})({"a": 1})
    finally:
        logger.remove(sink_id)
    assert messages == []


def test_intercept_handler_forwards_stdlib_records(monkeypatch) -> None:
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    configure_logging()

    records: list[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    try:
        logging.getLogger("some.library").warning("disk %s", "full")
    finally:
        logger.remove(sink_id)

    assert [record["message"] for record in records] == ["disk full"]
    assert records[0]["extra"]["stdlib"] == "some.library"
    assert records[0]["function"] == "test_intercept_handler_forwards_stdlib_records"
