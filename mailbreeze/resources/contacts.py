from __future__ import annotations

from mailbreeze.http_client import HttpTransport
from mailbreeze.models import (
    Contact,
    CreateContactParams,
    ListContactsParams,
    Page,
    SuppressReason,
    UpdateContactParams,
)
from mailbreeze.resources.base import Resource, build_query


class ContactsResource(Resource):
    """연락처 목록 하나에 묶인 연락처 작업이에요."""

    def __init__(self, transport: HttpTransport, list_id: str) -> None:
        super().__init__(transport)
        self.list_id = list_id

    @property
    def _base_path(self) -> str:
        return f"/contact-lists/{self.list_id}/contacts"

    async def create(self, params: CreateContactParams) -> Contact | None:
        return await self._transport.post(self._base_path, params, response_model=Contact)

    async def list(self, params: ListContactsParams | None = None) -> Page[Contact] | None:
        return await self._transport.get(self._base_path, params=build_query(params), response_model=Page[Contact])

    async def get(self, contact_id: str) -> Contact | None:
        return await self._transport.get(f"{self._base_path}/{contact_id}", response_model=Contact)

    async def update(self, contact_id: str, params: UpdateContactParams) -> Contact | None:
        return await self._transport.put(f"{self._base_path}/{contact_id}", params, response_model=Contact)

    async def delete(self, contact_id: str) -> None:
        await self._transport.delete(f"{self._base_path}/{contact_id}")

    async def suppress(self, contact_id: str, reason: SuppressReason) -> None:
        await self._transport.post(f"{self._base_path}/{contact_id}/suppress", {"reason": SuppressReason(reason).value})
