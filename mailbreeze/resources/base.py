from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from mailbreeze.http_client import HttpTransport


def build_query(params: BaseModel | None) -> dict[str, Any]:
    """비어 있는 문자열과 0 이하의 숫자는 쿼리에서 빼요."""
    if params is None:
        return {}
    values = params.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {
        key: value
        for key, value in values.items()
        if value != "" and not (isinstance(value, int) and value <= 0)
    }


class Resource:
    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport
