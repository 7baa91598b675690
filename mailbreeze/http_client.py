from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_core import to_json

from mailbreeze.common.errors import (
    MailBreezeError,
    RequestSerializationError,
    TransportError,
    get_retry_after,
)
from mailbreeze.common.logging import get_logger
from mailbreeze.common.retry import backoff_delay, retry_async
from mailbreeze.envelope import decode_response
from mailbreeze.settings import USER_AGENT, ClientSettings

logger = get_logger("mailbreeze.http_client")

API_KEY_HEADER = "X-API-Key"
IDEMPOTENCY_KEY_HEADER = "X-Idempotency-Key"

_HEADER_BREAK = re.compile(r"[\r\n]")

QueryParams = Mapping[str, str | int | Enum | None]


@dataclass(slots=True, frozen=True)
class EndpointCall:
    """한 번의 논리 호출이에요. 본문은 미리 직렬화해 두고 모든 재시도에서 같은 바이트를 보내요."""

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    content: bytes | None = None
    idempotency_key: str | None = None


def serialize_body(body: Any) -> bytes | None:
    """모델은 None 필드를 빼고 보내요. dict에 직접 넣은 None은 null로 그대로 보내요."""
    if body is None:
        return None
    try:
        return to_json(body, by_alias=True, exclude_none=isinstance(body, BaseModel))
    except ValueError as exc:
        raise RequestSerializationError(f"요청 본문을 JSON으로 직렬화하지 못했어요: {exc}") from exc


def encode_query(params: QueryParams | None) -> tuple[tuple[str, str], ...]:
    if not params:
        return ()
    encoded: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        encoded.append((key, str(value)))
    return tuple(encoded)


def _is_retryable(exc: Exception) -> bool:
    return isinstance(exc, MailBreezeError) and exc.retryable


def _retry_delay(attempt: int, exc: Exception) -> float:
    return backoff_delay(attempt, get_retry_after(exc))


class HttpTransport:
    """MailBreeze API에 대한 요청 생성, 재시도, 응답 해석을 맡아요.

    호출마다 바뀌는 상태를 인스턴스에 두지 않아요. 여러 태스크가 한 인스턴스를 동시에 써도 돼요.
    """

    def __init__(self, settings: ClientSettings, *, http_client: httpx.AsyncClient | None = None) -> None:
        self._api_key = settings.api_key
        self._base_url = settings.base_url.rstrip("/")
        self._max_retries = settings.max_retries
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)

    def __repr__(self) -> str:
        return f"HttpTransport(base_url={self._base_url!r}, max_retries={self._max_retries}, api_key=[REDACTED])"

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get(self, path: str, *, params: QueryParams | None = None, response_model: Any = None) -> Any:
        return await self.request("GET", path, params=params, response_model=response_model)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        response_model: Any = None,
        idempotency_key: str | None = None,
    ) -> Any:
        return await self.request(
            "POST",
            path,
            body=body,
            response_model=response_model,
            idempotency_key=idempotency_key,
        )

    async def patch(self, path: str, body: Any = None, *, response_model: Any = None) -> Any:
        return await self.request("PATCH", path, body=body, response_model=response_model)

    async def put(self, path: str, body: Any = None, *, response_model: Any = None) -> Any:
        return await self.request("PUT", path, body=body, response_model=response_model)

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        body: Any = None,
        response_model: Any = None,
        idempotency_key: str | None = None,
    ) -> Any:
        call = EndpointCall(
            method=method,
            path=path,
            params=encode_query(params),
            content=serialize_body(body),
            idempotency_key=idempotency_key,
        )
        headers = self._build_headers(call.idempotency_key)

        async def attempt_once(attempt: int) -> Any:
            return await self._send(call, headers, response_model)

        def log_retry(attempt: int, exc: Exception, delay: float) -> None:
            logger.warning(
                "request_retry_scheduled",
                method=call.method,
                path=call.path,
                attempt=attempt,
                delay_seconds=delay,
                status_code=getattr(exc, "status_code", None),
                error=str(exc),
            )

        try:
            return await retry_async(
                attempt_once,
                max_retries=self._max_retries,
                retry_filter=_is_retryable,
                delay_for=_retry_delay,
                sleep=self._sleep,
                on_retry=log_retry,
            )
        except MailBreezeError as exc:
            logger.debug("request_failed", method=call.method, path=call.path, error=str(exc))
            raise

    async def _send(self, call: EndpointCall, headers: Mapping[str, str], response_model: Any) -> Any:
        request = self._client.build_request(
            call.method,
            f"{self._base_url}{call.path}",
            params=call.params or None,
            content=call.content,
            headers=headers,
        )
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            raise TransportError("MailBreeze API 요청이 시간 초과됐어요.") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"MailBreeze API 연결에 실패했어요: {exc}") from exc

        return decode_response(response.status_code, response.headers, response.content, response_model)

    def _build_headers(self, idempotency_key: str | None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            API_KEY_HEADER: self._api_key.get_secret_value(),
            "User-Agent": USER_AGENT,
        }
        if idempotency_key:
            # 헤더 주입을 막으려고 CR/LF가 섞인 키는 보내지 않고 호출은 그대로 진행해요.
            if _HEADER_BREAK.search(idempotency_key):
                logger.warning("idempotency_key_dropped", reason="contains_line_break")
            else:
                headers[IDEMPOTENCY_KEY_HEADER] = idempotency_key
        return headers

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
