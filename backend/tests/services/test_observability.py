"""Observability — JSON log lines, request correlation, DB error mapping."""

import json
import logging

from sqlalchemy.exc import IntegrityError, OperationalError

from tracker.infrastructure.database import to_database_error
from tracker.infrastructure.observability import (
    JSONFormatter, RequestIdFilter, request_id_var, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "tracker.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_emits_known_extras_only():
    line = JSONFormatter().format(
        _record(field="creator", entity_type="user", unrelated="x"),
    )
    log = json.loads(line)
    assert log["message"] == "hello world"
    assert log["level"] == "INFO"
    assert log["field"] == "creator"
    assert log["entity_type"] == "user"
    assert "unrelated" not in log
    assert "entity_key" not in log


def test_request_id_filter_stamps_bound_id():
    token = request_id_var.set("req-123")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert json.loads(JSONFormatter().format(record))["request_id"] == "req-123"


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    first = setup_logging("debug", "text")
    second = setup_logging("info", "json")
    try:
        assert len(logging.root.handlers) == before + 1
        assert first not in logging.root.handlers
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)


def test_sqlalchemy_errors_map_to_database_error():
    integrity = to_database_error(IntegrityError("INSERT", {}, Exception("dup")))
    operational = to_database_error(OperationalError("SELECT", {}, Exception("down")))
    assert integrity.operation == "commit"
    assert operational.operation == "execute"
    assert integrity.http_status == 503


async def test_response_echoes_client_request_id(client):
    res = await client.get("/api/v1/health/", headers={"X-Request-ID": "abc"})
    assert res.headers["X-Request-ID"] == "abc"


async def test_response_mints_request_id(client):
    res = await client.get("/api/v1/health/")
    assert len(res.headers["X-Request-ID"]) == 32


async def test_error_body_carries_request_id(client):
    res = await client.get(
        "/api/v1/users/00000000-0000-0000-0000-000000000000",
        headers={"X-Request-ID": "trace-me"},
    )
    assert res.status_code == 404
    assert res.json()["error"]["request_id"] == "trace-me"
