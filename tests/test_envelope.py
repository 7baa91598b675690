from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from mailbreeze.common.errors import APIError, ResponseDecodeError
from mailbreeze.envelope import decode_response, parse_retry_after
from mailbreeze.models import Email


def _body(payload: object) -> bytes:
    return json.dumps(payload).encode()


def test_parse_retry_after_integer_seconds() -> None:
    assert parse_retry_after("60") == 60
    assert parse_retry_after(" 5 ") == 5


def test_parse_retry_after_future_http_date() -> None:
    future = datetime.now(timezone.utc) + timedelta(seconds=45)
    value = parse_retry_after(format_datetime(future, usegmt=True))
    assert 40 <= value <= 50


def test_parse_retry_after_uses_given_clock() -> None:
    now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert parse_retry_after("Mon, 01 Jan 2024 12:00:30 GMT", now=now) == 30


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "soon",
        "-5",
        "1.5",
        "Mon, 01 Jan 2001 00:00:00 GMT",
        "9" * 5000,
        "9" * 400,
        "Mon, 01 Jan 99999999999999999999 00:00:00 GMT",
    ],
)
def test_parse_retry_after_falls_back_to_zero(value: str | None) -> None:
    assert parse_retry_after(value) == 0


@pytest.mark.parametrize("retry_after", ["9" * 5000, "Mon, 01 Jan 99999999999999999999 00:00:00 GMT"])
def test_unparseable_retry_after_still_yields_api_error(retry_after: str) -> None:
    with pytest.raises(APIError) as exc_info:
        decode_response(429, {"Retry-After": retry_after}, _body({"success": False}))
    assert exc_info.value.status_code == 429
    assert exc_info.value.retry_after_seconds == 0
    assert exc_info.value.retryable


def test_204_never_decodes_body() -> None:
    assert decode_response(204, {}, b"not json at all", Email) is None


def test_success_decodes_data_into_model() -> None:
    body = _body({"success": True, "data": {"id": "email_123", "from": "a@b.com", "to": ["c@d.com"]}})
    email = decode_response(200, {}, body, Email)
    assert isinstance(email, Email)
    assert email.id == "email_123"
    assert email.from_ == "a@b.com"


def test_success_without_target_or_data_returns_none() -> None:
    assert decode_response(200, {}, _body({"success": True, "data": {"id": "x"}})) is None
    assert decode_response(200, {}, _body({"success": True}), Email) is None
    assert decode_response(200, {}, _body({"success": True, "data": None}), Email) is None


def test_malformed_body_with_error_status_synthesizes_error() -> None:
    headers = {"X-Request-Id": "req_1", "Retry-After": "7"}
    with pytest.raises(APIError) as exc_info:
        decode_response(400, headers, b"not json", Email)
    error = exc_info.value
    assert error.status_code == 400
    assert error.code == "VALIDATION_ERROR"
    assert error.message == "Unknown error"
    assert error.request_id == "req_1"
    assert error.retry_after_seconds == 7


def test_malformed_body_with_server_error_status() -> None:
    with pytest.raises(APIError) as exc_info:
        decode_response(502, {}, b"<html>Bad Gateway</html>")
    assert exc_info.value.code == "SERVER_ERROR"


def test_malformed_body_with_ok_status_is_not_an_error() -> None:
    assert decode_response(200, {}, b"not json", Email) is None
    assert decode_response(200, {}, b"", Email) is None
    assert decode_response(200, {}, b"[1, 2]", Email) is None


def test_success_false_with_200_and_no_error_object() -> None:
    with pytest.raises(APIError) as exc_info:
        decode_response(200, {}, _body({"success": False}), Email)
    error = exc_info.value
    assert error.status_code == 400
    assert error.code == "UNKNOWN_ERROR"
    assert error.message == "Unknown error"


def test_success_false_with_200_uses_error_object() -> None:
    body = _body(
        {
            "success": False,
            "error": {"code": "INVALID_EMAIL", "message": "Email is invalid", "details": {"field": "to"}},
        }
    )
    with pytest.raises(APIError) as exc_info:
        decode_response(200, {}, body)
    error = exc_info.value
    assert error.status_code == 400
    assert error.code == "INVALID_EMAIL"
    assert error.message == "Email is invalid"
    assert error.details == {"field": "to"}


def test_error_status_wins_even_with_success_true_and_error_object() -> None:
    body = _body({"success": True, "error": {"code": "BAD", "message": "nope"}})
    with pytest.raises(APIError) as exc_info:
        decode_response(400, {}, body, Email)
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "BAD"


def test_error_status_with_success_true_and_no_error_object() -> None:
    with pytest.raises(APIError) as exc_info:
        decode_response(503, {"X-Request-Id": "req_9"}, _body({"success": True, "data": {"id": "x"}}), Email)
    error = exc_info.value
    assert error.status_code == 503
    assert error.code == "UNKNOWN_ERROR"
    assert error.request_id == "req_9"


def test_error_object_without_code_derives_code_from_status() -> None:
    body = _body({"success": False, "error": {"message": "Too many requests"}})
    with pytest.raises(APIError) as exc_info:
        decode_response(429, {"Retry-After": "30"}, body)
    error = exc_info.value
    assert error.code == "RATE_LIMIT_EXCEEDED"
    assert error.retry_after_seconds == 30


def test_undecodable_data_is_a_decode_error_not_an_api_error() -> None:
    body = _body({"success": True, "data": {"from": "a@b.com"}})
    with pytest.raises(ResponseDecodeError):
        decode_response(200, {}, body, Email)
