from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, StrictBool, TypeAdapter, ValidationError

from mailbreeze.common.errors import APIError, ResponseDecodeError, code_from_status

REQUEST_ID_HEADER = "X-Request-Id"
RETRY_AFTER_HEADER = "Retry-After"

UNKNOWN_ERROR_MESSAGE = "Unknown error"
UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"


class EnvelopeError(BaseModel):
    code: str = ""
    message: str = ""
    details: dict[str, Any] | None = None


class Envelope(BaseModel):
    """모든 응답이 따르는 {success, data, error, meta} 래퍼예요.

    data와 meta는 리소스마다 모양이 달라서 여기서는 해석하지 않고 그대로 넘겨요.
    """

    success: StrictBool = False
    data: Any = None
    error: EnvelopeError | None = None
    meta: Any = None


def parse_retry_after(value: str | None, *, now: datetime | None = None) -> int:
    """Retry-After 헤더를 초 단위로 바꿔요.

    정수 초와 HTTP-date(RFC 7231 §7.1.3) 둘 다 받아요. 지난 시각이나 해석할 수 없는 값은
    오류 대신 0("힌트 없음")으로 처리해요.
    """
    if not value:
        return 0

    value = value.strip()
    if value.isascii() and value.isdigit():
        try:
            seconds = int(value)
            # 대기 시간은 float로 쓰이니 float로 표현되지 않는 값도 버려요.
            float(seconds)
        except (ValueError, OverflowError):
            return 0
        return seconds

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)

    current = now or datetime.now(timezone.utc)
    delta = int((retry_at - current).total_seconds())
    return delta if delta > 0 else 0


@lru_cache(maxsize=128)
def _adapter(response_model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_model)


def _build_api_error(
    status_code: int,
    envelope_error: EnvelopeError | None,
    *,
    request_id: str,
    retry_after_seconds: int,
) -> APIError:
    if envelope_error is None:
        return APIError(
            status_code=status_code,
            code=UNKNOWN_ERROR_CODE,
            message=UNKNOWN_ERROR_MESSAGE,
            request_id=request_id,
            retry_after_seconds=retry_after_seconds,
        )
    return APIError(
        status_code=status_code,
        code=envelope_error.code or code_from_status(status_code),
        message=envelope_error.message or UNKNOWN_ERROR_MESSAGE,
        request_id=request_id,
        retry_after_seconds=retry_after_seconds,
        details=envelope_error.details,
    )


def decode_response(
    status_code: int,
    headers: Mapping[str, str],
    body: bytes,
    response_model: Any = None,
) -> Any:
    """HTTP 응답 하나를 해석해요.

    APIError를 던지거나, response_model로 해석한 data를 돌려주거나, 해석할 게 없으면 None을 돌려줘요.
    판단 순서는 204 → 읽을 수 없는 본문 → envelope의 success/error → HTTP 상태 코드예요.
    상태 코드가 400 이상이면 envelope가 성공이라고 해도 항상 오류예요.
    """
    if status_code == 204:
        return None

    request_id = headers.get(REQUEST_ID_HEADER, "")
    retry_after_seconds = parse_retry_after(headers.get(RETRY_AFTER_HEADER))

    try:
        envelope = Envelope.model_validate_json(body)
    except ValidationError:
        if status_code >= 400:
            raise APIError(
                status_code=status_code,
                code=code_from_status(status_code),
                message=UNKNOWN_ERROR_MESSAGE,
                request_id=request_id,
                retry_after_seconds=retry_after_seconds,
            ) from None
        return None

    if not envelope.success or envelope.error is not None:
        # 2xx와 success:false 조합은 클라이언트 쪽 검증 실패로 봐요.
        effective_status = status_code if status_code >= 400 else 400
        raise _build_api_error(
            effective_status,
            envelope.error,
            request_id=request_id,
            retry_after_seconds=retry_after_seconds,
        )

    if status_code >= 400:
        raise _build_api_error(
            status_code,
            None,
            request_id=request_id,
            retry_after_seconds=retry_after_seconds,
        )

    if response_model is None or envelope.data is None:
        return None

    try:
        return _adapter(response_model).validate_python(envelope.data)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"MailBreeze API 응답 데이터를 해석하지 못했어요: 필드 오류 {exc.error_count()}개"
        ) from exc
