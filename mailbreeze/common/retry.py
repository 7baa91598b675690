from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")


def backoff_delay(attempt: int, retry_after_seconds: int = 0) -> float:
    """서버 힌트가 있으면 그대로 쓰고, 없으면 1s, 2s, 4s … 로 늘려요. attempt는 1부터 세요."""
    if retry_after_seconds > 0:
        return float(retry_after_seconds)
    return float(2 ** (attempt - 1))


async def retry_async(
    func: Callable[[int], Awaitable[T]],
    *,
    max_retries: int,
    retry_filter: Callable[[Exception], bool],
    delay_for: Callable[[int, Exception], float],
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    on_retry: Callable[[int, Exception, float], None] | None = None,
) -> T:
    """func를 최대 max_retries + 1번 순서대로 실행해요.

    CancelledError와 TimeoutError는 재시도하지 않고 그대로 전파해요.
    취소는 진행 중인 시도와 대기 중인 sleep을 곧바로 끊고, 그 뒤로는 어떤 시도도 시작하지 않아요.
    """
    max_attempts = max(max_retries, 0) + 1
    attempt = 1
    while True:
        try:
            return await func(attempt)
        except (asyncio.CancelledError, TimeoutError):
            raise
        except Exception as exc:
            if attempt >= max_attempts or not retry_filter(exc):
                raise

            delay = delay_for(attempt, exc)
            if on_retry is not None:
                on_retry(attempt, exc, delay)
            await sleep(delay)
            attempt += 1
