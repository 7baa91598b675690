from __future__ import annotations

from collections.abc import Sequence

from mailbreeze.models import (
    BatchVerificationResult,
    ListVerificationsParams,
    Page,
    VerificationResult,
    VerificationStats,
    VerifyEmailParams,
)
from mailbreeze.resources.base import Resource, build_query


class VerificationResource(Resource):
    async def verify(self, params: VerifyEmailParams) -> VerificationResult | None:
        return await self._transport.post(
            "/email-verification/single",
            params,
            response_model=VerificationResult,
        )

    async def batch(self, emails: Sequence[str]) -> BatchVerificationResult | None:
        return await self._transport.post(
            "/email-verification/batch",
            {"emails": list(emails)},
            response_model=BatchVerificationResult,
        )

    async def get(self, verification_id: str) -> BatchVerificationResult | None:
        return await self._transport.get(
            f"/email-verification/{verification_id}",
            response_model=BatchVerificationResult,
        )

    async def list(self, params: ListVerificationsParams | None = None) -> Page[BatchVerificationResult] | None:
        return await self._transport.get(
            "/email-verification",
            params=build_query(params),
            response_model=Page[BatchVerificationResult],
        )

    async def stats(self) -> VerificationStats | None:
        return await self._transport.get("/email-verification/stats", response_model=VerificationStats)
