from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from mailbreeze.client import MailBreeze
from mailbreeze.http_client import HttpTransport
from mailbreeze.settings import ClientSettings

TEST_API_KEY = "sk_test_123"
TEST_BASE_URL = "https://api.mailbreeze.test/api/v1"

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def envelope(data: Any = None, *, success: bool = True, error: dict[str, Any] | None = None) -> dict[str, Any]:
    """응답 envelope 본문을 만들어요."""
    body: dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if error is not None:
        body["error"] = error
    return body


class RecordingTransport(HttpTransport):
    """실제로 기다리지 않고 재시도 대기 시간만 기록하는 HttpTransport예요."""

    def __init__(self, settings: ClientSettings, *, http_client: httpx.AsyncClient) -> None:
        super().__init__(settings, http_client=http_client)
        self.sleeps: list[float] = []

    async def _sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


def build_settings(*, max_retries: int = 3) -> ClientSettings:
    return ClientSettings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, max_retries=max_retries)


def build_transport(handler: Handler, *, max_retries: int = 3) -> RecordingTransport:
    return RecordingTransport(
        build_settings(max_retries=max_retries),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def build_client(handler: Handler, *, max_retries: int = 0) -> MailBreeze:
    return MailBreeze(
        TEST_API_KEY,
        base_url=TEST_BASE_URL,
        max_retries=max_retries,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """개발자 환경의 MAILBREEZE_* 변수나 .env 파일이 테스트에 섞이지 않게 해요."""
    for name in ("MAILBREEZE_API_KEY", "MAILBREEZE_BASE_URL", "MAILBREEZE_TIMEOUT_SECONDS", "MAILBREEZE_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
