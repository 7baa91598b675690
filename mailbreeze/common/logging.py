from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog._config import BoundLoggerLazyProxy
from structlog.typing import FilteringBoundLogger

REDACTED = "[REDACTED]"

_SECRET_KEYS = frozenset({"api_key", "x_api_key", "authorization"})


def redact_secrets(_: Any, __: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """API 키처럼 보이는 필드는 값을 가려요. 호출하는 쪽이 실수로 넘겨도 출력에 남지 않아요."""
    for key in event_dict:
        if key.lower().replace("-", "_") in _SECRET_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: int = logging.INFO, *, json_output: bool = True) -> None:
    """애플리케이션이 원할 때만 호출해요. import 시점에는 아무것도 설정하지 않고 root logger도 건드리지 않아요."""
    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_secrets,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    # PrintLoggerFactory는 이름을 받지 않아서 이벤트 필드로 붙여요.
    return cast(FilteringBoundLogger, BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=()))
