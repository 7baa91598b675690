from __future__ import annotations

from mailbreeze.http_client import HttpTransport
from mailbreeze.models import (
    CancelEnrollmentResult,
    Enrollment,
    EnrollParams,
    ListEnrollmentsParams,
    Page,
)
from mailbreeze.resources.base import Resource, build_query


class EnrollmentsResource(Resource):
    async def list(self, params: ListEnrollmentsParams | None = None) -> Page[Enrollment] | None:
        return await self._transport.get(
            "/automations/enrollments",
            params=build_query(params),
            response_model=Page[Enrollment],
        )

    async def cancel(self, enrollment_id: str) -> CancelEnrollmentResult | None:
        return await self._transport.post(
            f"/automations/enrollments/{enrollment_id}/cancel",
            response_model=CancelEnrollmentResult,
        )


class AutomationsResource(Resource):
    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.enrollments = EnrollmentsResource(transport)

    async def enroll(self, params: EnrollParams, *, idempotency_key: str | None = None) -> Enrollment | None:
        return await self._transport.post(
            "/automations/enroll",
            params,
            response_model=Enrollment,
            idempotency_key=idempotency_key,
        )
