from __future__ import annotations

from typing import Any

import pytest

from mailbreeze.common.errors import (
    APIError,
    TransportError,
    code_from_status,
    get_retry_after,
    is_authentication_error,
    is_not_found_error,
    is_rate_limit_error,
    is_server_error,
    is_validation_error,
)


def _api_error(status_code: int, *, retry_after_seconds: int = 0, details: dict[str, Any] | None = None) -> APIError:
    return APIError(
        status_code=status_code,
        code=code_from_status(status_code),
        message="boom",
        retry_after_seconds=retry_after_seconds,
        details=details,
    )


def test_str_includes_request_id_when_present() -> None:
    error = APIError(status_code=404, code="NOT_FOUND", message="Email not found", request_id="req_abc123")
    assert str(error) == "mailbreeze: Email not found (code: NOT_FOUND, status: 404, request_id: req_abc123)"


def test_str_omits_request_id_clause_when_absent() -> None:
    error = APIError(status_code=400, code="VALIDATION_ERROR", message="Invalid email")
    assert str(error) == "mailbreeze: Invalid email (code: VALIDATION_ERROR, status: 400)"


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (400, "VALIDATION_ERROR"),
        (401, "AUTHENTICATION_ERROR"),
        (403, "FORBIDDEN"),
        (404, "NOT_FOUND"),
        (429, "RATE_LIMIT_EXCEEDED"),
        (500, "SERVER_ERROR"),
        (503, "SERVER_ERROR"),
        (409, "UNKNOWN_ERROR"),
        (418, "UNKNOWN_ERROR"),
    ],
)
def test_code_from_status(status_code: int, expected: str) -> None:
    assert code_from_status(status_code) == expected


def test_predicates_match_on_status_code_only() -> None:
    assert is_authentication_error(_api_error(401))
    assert is_validation_error(_api_error(400))
    assert is_not_found_error(_api_error(404))
    assert is_rate_limit_error(_api_error(429))
    assert is_server_error(_api_error(500))
    assert is_server_error(_api_error(502))

    # 코드 문자열이 아니라 상태 코드로만 판단해요.
    mismatched = APIError(status_code=404, code="VALIDATION_ERROR", message="x")
    assert not is_validation_error(mismatched)
    assert is_not_found_error(mismatched)


@pytest.mark.parametrize("value", [None, ValueError("plain"), TransportError(), KeyboardInterrupt()])
def test_predicates_are_false_for_non_api_errors(value: BaseException | None) -> None:
    assert not is_authentication_error(value)
    assert not is_validation_error(value)
    assert not is_not_found_error(value)
    assert not is_rate_limit_error(value)
    assert not is_server_error(value)
    assert get_retry_after(value) == 0


def test_get_retry_after_reads_hint() -> None:
    assert get_retry_after(_api_error(429, retry_after_seconds=60)) == 60
    assert get_retry_after(_api_error(429)) == 0


def test_retry_after_is_never_negative() -> None:
    assert _api_error(429, retry_after_seconds=-5).retry_after_seconds == 0


def test_api_error_is_read_only() -> None:
    error = _api_error(400, details={"field": "email"})
    with pytest.raises(AttributeError):
        error.status_code = 500  # type: ignore[misc]
    with pytest.raises(TypeError):
        error.details["field"] = "name"  # type: ignore[index]
    assert error.details == {"field": "email"}
    assert _api_error(400).details == {}


def test_retryable_flag_follows_status() -> None:
    assert _api_error(429).retryable
    assert _api_error(503).retryable
    assert not _api_error(400).retryable
    assert not _api_error(404).retryable
