from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from mailbreeze.common.errors import ConfigurationError
from mailbreeze.http_client import HttpTransport
from mailbreeze.resources import (
    AttachmentsResource,
    AutomationsResource,
    ContactsResource,
    EmailsResource,
    ListsResource,
    VerificationResource,
)
from mailbreeze.settings import ClientSettings


class MailBreeze:
    """MailBreeze API 클라이언트예요.

    인자로 준 값이 환경 변수(MAILBREEZE_*)보다 우선해요. 설정은 생성 시점에 한 번 정해지고 바뀌지 않아서
    한 프로세스 안에 서로 다른 클라이언트를 여러 개 둘 수 있어요.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        max_retries: int | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        overrides: dict[str, Any] = {
            name: value
            for name, value in (
                ("api_key", api_key),
                ("base_url", base_url),
                ("timeout_seconds", timeout_seconds),
                ("max_retries", max_retries),
            )
            if value is not None
        }
        if settings is None:
            settings = ClientSettings(**overrides)
        elif overrides:
            settings = ClientSettings(**{**settings.model_dump(), **overrides})

        if not settings.api_key.get_secret_value().strip():
            raise ConfigurationError("MailBreeze API 키가 설정되지 않았어요.")

        self._settings = settings
        self._transport = HttpTransport(settings, http_client=http_client)

        self.emails = EmailsResource(self._transport)
        self.lists = ListsResource(self._transport)
        self.attachments = AttachmentsResource(self._transport)
        self.verification = VerificationResource(self._transport)
        self.automations = AutomationsResource(self._transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def contacts(self, list_id: str) -> ContactsResource:
        return ContactsResource(self._transport, list_id)

    def __repr__(self) -> str:
        return f"MailBreeze(base_url={self._settings.base_url!r}, api_key=[REDACTED])"

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> MailBreeze:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
