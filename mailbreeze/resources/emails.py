from __future__ import annotations

from mailbreeze.models import (
    Email,
    EmailStats,
    EmailStatsResponse,
    ListEmailsParams,
    Page,
    SendEmailParams,
)
from mailbreeze.resources.base import Resource, build_query


class EmailsResource(Resource):
    async def send(self, params: SendEmailParams, *, idempotency_key: str | None = None) -> Email | None:
        return await self._transport.post(
            "/emails",
            params,
            response_model=Email,
            idempotency_key=idempotency_key,
        )

    async def list(self, params: ListEmailsParams | None = None) -> Page[Email] | None:
        return await self._transport.get("/emails", params=build_query(params), response_model=Page[Email])

    async def get(self, email_id: str) -> Email | None:
        return await self._transport.get(f"/emails/{email_id}", response_model=Email)

    async def stats(self) -> EmailStats | None:
        response = await self._transport.get("/emails/stats", response_model=EmailStatsResponse)
        if response is None:
            return None
        return response.stats
