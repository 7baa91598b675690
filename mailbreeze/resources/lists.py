from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from mailbreeze.common.errors import ResponseDecodeError
from mailbreeze.models import (
    CreateListParams,
    ListListsParams,
    ListStats,
    MailingList,
    Page,
    PaginationMeta,
    UpdateListParams,
)
from mailbreeze.resources.base import Resource, build_query

_MAILING_LIST_ARRAY: TypeAdapter[list[MailingList]] = TypeAdapter(list[MailingList])


def parse_mailing_lists(raw: Any) -> Page[MailingList]:
    """목록 조회 응답은 배열이거나 페이지 객체예요. 배열을 먼저 시도하고, 배열이면 한 페이지짜리 메타를 붙여요."""
    try:
        lists = _MAILING_LIST_ARRAY.validate_python(raw)
    except ValidationError:
        try:
            return Page[MailingList].model_validate(raw)
        except ValidationError as exc:
            raise ResponseDecodeError("연락처 목록 응답 형식이 올바르지 않아요.") from exc

    return Page[MailingList](
        items=lists,
        pagination=PaginationMeta(
            page=1,
            limit=len(lists),
            total=len(lists),
            total_pages=1,
            has_next=False,
            has_prev=False,
        ),
    )


class ListsResource(Resource):
    async def create(self, params: CreateListParams) -> MailingList | None:
        return await self._transport.post("/contact-lists", params, response_model=MailingList)

    async def list(self, params: ListListsParams | None = None) -> Page[MailingList] | None:
        raw = await self._transport.get("/contact-lists", params=build_query(params), response_model=Any)
        if raw is None:
            return None
        return parse_mailing_lists(raw)

    async def get(self, list_id: str) -> MailingList | None:
        return await self._transport.get(f"/contact-lists/{list_id}", response_model=MailingList)

    async def update(self, list_id: str, params: UpdateListParams) -> MailingList | None:
        return await self._transport.put(f"/contact-lists/{list_id}", params, response_model=MailingList)

    async def delete(self, list_id: str) -> None:
        await self._transport.delete(f"/contact-lists/{list_id}")

    async def stats(self, list_id: str) -> ListStats | None:
        return await self._transport.get(f"/contact-lists/{list_id}/stats", response_model=ListStats)
