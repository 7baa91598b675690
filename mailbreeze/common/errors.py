from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class MailBreezeError(Exception):
    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.retryable = retryable


class TransportError(MailBreezeError):
    """HTTP 응답을 받기 전에 실패했어요. 연결 거부, 네트워크 오류, 시간 초과가 여기에 속해요."""

    def __init__(self, message: str = "MailBreeze API 연결에 실패했어요.") -> None:
        super().__init__(message, retryable=True)


class ResponseDecodeError(MailBreezeError):
    def __init__(self, message: str = "MailBreeze API 응답 데이터를 해석하지 못했어요.") -> None:
        super().__init__(message, retryable=False)


class RequestSerializationError(MailBreezeError):
    def __init__(self, message: str = "요청 본문을 JSON으로 직렬화하지 못했어요.") -> None:
        super().__init__(message, retryable=False)


class ConfigurationError(MailBreezeError):
    def __init__(self, message: str = "설정이 올바르지 않아요.") -> None:
        super().__init__(message, retryable=False)


class APIError(MailBreezeError):
    """서비스가 거절한 호출 하나를 표현해요.

    생성된 뒤에는 바뀌지 않아요. 모든 필드는 읽기 전용 프로퍼티로만 노출해요.
    """

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        request_id: str = "",
        retry_after_seconds: int = 0,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, retryable=status_code == 429 or status_code >= 500)
        self._status_code = status_code
        self._code = code
        self._request_id = request_id
        self._retry_after_seconds = max(retry_after_seconds, 0)
        self._details: Mapping[str, Any] = MappingProxyType(dict(details or {}))

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def code(self) -> str:
        return self._code

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def retry_after_seconds(self) -> int:
        return self._retry_after_seconds

    @property
    def details(self) -> Mapping[str, Any]:
        return self._details

    def __str__(self) -> str:
        if self._request_id:
            return (
                f"mailbreeze: {self.message} (code: {self._code}, status: {self._status_code}, "
                f"request_id: {self._request_id})"
            )
        return f"mailbreeze: {self.message} (code: {self._code}, status: {self._status_code})"

    def __repr__(self) -> str:
        return (
            f"APIError(status_code={self._status_code}, code={self._code!r}, "
            f"message={self.message!r}, request_id={self._request_id!r})"
        )


def code_from_status(status_code: int) -> str:
    """서버가 machine code를 주지 않았을 때 상태 코드에서 기본 코드를 정해요."""
    if status_code == 400:
        return "VALIDATION_ERROR"
    if status_code == 401:
        return "AUTHENTICATION_ERROR"
    if status_code == 403:
        return "FORBIDDEN"
    if status_code == 404:
        return "NOT_FOUND"
    if status_code == 429:
        return "RATE_LIMIT_EXCEEDED"
    if status_code >= 500:
        return "SERVER_ERROR"
    return "UNKNOWN_ERROR"


def is_authentication_error(err: BaseException | None) -> bool:
    return isinstance(err, APIError) and err.status_code == 401


def is_validation_error(err: BaseException | None) -> bool:
    return isinstance(err, APIError) and err.status_code == 400


def is_not_found_error(err: BaseException | None) -> bool:
    return isinstance(err, APIError) and err.status_code == 404


def is_rate_limit_error(err: BaseException | None) -> bool:
    return isinstance(err, APIError) and err.status_code == 429


def is_server_error(err: BaseException | None) -> bool:
    return isinstance(err, APIError) and err.status_code >= 500


def get_retry_after(err: BaseException | None) -> int:
    """APIError가 아니거나 힌트가 없으면 0을 돌려줘요."""
    if isinstance(err, APIError):
        return err.retry_after_seconds
    return 0
