from mailbreeze.common.errors import (
    APIError,
    ConfigurationError,
    MailBreezeError,
    RequestSerializationError,
    ResponseDecodeError,
    TransportError,
    code_from_status,
    get_retry_after,
    is_authentication_error,
    is_not_found_error,
    is_rate_limit_error,
    is_server_error,
    is_validation_error,
)

__all__ = [
    "APIError",
    "ConfigurationError",
    "MailBreezeError",
    "RequestSerializationError",
    "ResponseDecodeError",
    "TransportError",
    "code_from_status",
    "get_retry_after",
    "is_authentication_error",
    "is_not_found_error",
    "is_rate_limit_error",
    "is_server_error",
    "is_validation_error",
]
