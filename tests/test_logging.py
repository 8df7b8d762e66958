import json
import logging
import sys

from converter.core.logging import JsonFormatter, RequestIdFilter, request_id_ctx


def _record(msg, *args, exc_info=None, **extra):
    record = logging.LogRecord("converter.test", logging.INFO, __file__, 1, msg, args, exc_info)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_request_id_and_extra():
    token = request_id_ctx.set("rid-1")
    try:
        record = _record("converted %s", "USD", duration_ms=3.5)
        RequestIdFilter().filter(record)
        out = json.loads(JsonFormatter().format(record))
    finally:
        request_id_ctx.reset(token)
    assert out["message"] == "converted USD"
    assert out["request_id"] == "rid-1"
    assert out["duration_ms"] == 3.5
    assert out["level"] == "INFO"


def test_secret_is_redacted_in_message():
    record = _record("GET %s failed", "https://v6.example.test/v6/abc123/pair/USD/EUR")
    out = json.loads(JsonFormatter(["abc123"]).format(record))
    assert out["message"] == "GET https://v6.example.test/v6/***/pair/USD/EUR failed"


def test_secret_is_redacted_in_extra_and_traceback():
    try:
        raise RuntimeError("fetch https://v6.example.test/v6/abc123/codes")
    except RuntimeError:
        exc_info = sys.exc_info()
    record = _record("lookup failed", exc_info=exc_info, url="https://v6.example.test/v6/abc123/codes")
    line = JsonFormatter(["abc123"]).format(record)
    assert "abc123" not in line
    out = json.loads(line)
    assert out["url"] == "https://v6.example.test/v6/***/codes"
    assert "v6/***/codes" in out["exc_info"]


def test_empty_secret_leaves_output_untouched():
    record = _record("plain %d", 1)
    out = json.loads(JsonFormatter([""]).format(record))
    assert out["message"] == "plain 1"
