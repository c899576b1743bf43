import json
import logging

import pytest

from core.logging import bootstrap_logging, context, get_context, get_logger, shutdown_logging
from core.logging.formatter import ConsoleFormatter, JSONFormatter
from core.logging.levels import to_level


def _record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("analyzer.test", level, __file__, 10, msg, None, None, func="fn")
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_context_is_scoped_to_with_block():
    with context(session_id="abc", puuid=None):
        assert get_context() == {"session_id": "abc"}
    assert get_context() == {}


def test_json_formatter_includes_bound_context():
    with context(session_id="s1", region="europe"):
        line = JSONFormatter().format(_record(service="session"))

    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["service"] == "session"
    assert payload["context"] == {"session_id": "s1", "region": "europe"}


def test_console_formatter_plain_line():
    line = ConsoleFormatter(color=False).format(_record(level=logging.WARNING))

    assert " | WARNING | - | analyzer.test:fn:10 | hello" in line


def test_to_level_handles_custom_names():
    assert to_level("success") == 25
    assert to_level("trace") == 5
    assert to_level("warning") == logging.WARNING
    assert to_level("nonsense") == logging.INFO
    assert to_level(None, default=logging.DEBUG) == logging.DEBUG


def test_structured_logger_is_lazy_and_tags_service(caplog):
    log = get_logger("analyzer.lazy", service="fetcher")
    calls = []

    def expensive():
        calls.append(1)
        return "computed"

    with caplog.at_level(logging.INFO, logger="analyzer.lazy"):
        log.debug(expensive)
        log.info(expensive)

    assert calls == [1]
    assert caplog.records[-1].getMessage() == "computed"
    assert caplog.records[-1].service == "fetcher"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        shutdown_logging()
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


def test_jsonl_file_keeps_session_context(tmp_path, restore_root_logger):
    bootstrap_logging(log_dir=tmp_path, console=False, level="INFO")
    log = get_logger("analyzer.session", service="session")

    with context(session_id="s1", puuid="p", region="europe"):
        log.info("Analyzing 2 matches")
    log.info("outside any session")
    shutdown_logging()

    lines = [json.loads(line) for line in (tmp_path / "analyzer.jsonl").read_text().splitlines()]
    by_message = {line["message"]: line for line in lines}
    assert by_message["Analyzing 2 matches"]["context"] == {"session_id": "s1", "puuid": "p", "region": "europe"}
    assert by_message["Analyzing 2 matches"]["service"] == "session"
    assert "context" not in by_message["outside any session"]
