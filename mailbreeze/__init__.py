"""MailBreeze 이메일 플랫폼 API용 비동기 파이썬 클라이언트예요.

    async with MailBreeze("sk_live_xxx") as client:
        email = await client.emails.send(
            SendEmailParams(
                from_="hello@yourdomain.com",
                to=["user@example.com"],
                subject="Welcome!",
                html="<h1>Welcome!</h1>",
            )
        )
"""

from mailbreeze._version import __version__
from mailbreeze.client import MailBreeze
from mailbreeze.common.errors import (
    APIError,
    ConfigurationError,
    MailBreezeError,
    RequestSerializationError,
    ResponseDecodeError,
    TransportError,
    get_retry_after,
    is_authentication_error,
    is_not_found_error,
    is_rate_limit_error,
    is_server_error,
    is_validation_error,
)
from mailbreeze.common.logging import configure_logging
from mailbreeze.models import (
    Attachment,
    BatchResults,
    BatchVerificationResult,
    CancelEnrollmentResult,
    Contact,
    ContactStatus,
    CreateContactParams,
    CreateListParams,
    CreateUploadParams,
    Email,
    EmailStats,
    EmailStatus,
    EnrollParams,
    Enrollment,
    EnrollmentStatus,
    ListContactsParams,
    ListEmailsParams,
    ListEnrollmentsParams,
    ListListsParams,
    ListStats,
    ListVerificationsParams,
    MailingList,
    Page,
    PaginationMeta,
    SendEmailParams,
    SuppressReason,
    UpdateContactParams,
    UpdateListParams,
    UploadUrl,
    VerificationResult,
    VerificationStats,
    VerificationStatus,
    VerifyEmailParams,
)
from mailbreeze.settings import ClientSettings

__all__ = [
    "APIError",
    "Attachment",
    "BatchResults",
    "BatchVerificationResult",
    "CancelEnrollmentResult",
    "ClientSettings",
    "ConfigurationError",
    "Contact",
    "ContactStatus",
    "CreateContactParams",
    "CreateListParams",
    "CreateUploadParams",
    "Email",
    "EmailStats",
    "EmailStatus",
    "EnrollParams",
    "Enrollment",
    "EnrollmentStatus",
    "ListContactsParams",
    "ListEmailsParams",
    "ListEnrollmentsParams",
    "ListListsParams",
    "ListStats",
    "ListVerificationsParams",
    "MailBreeze",
    "MailBreezeError",
    "MailingList",
    "Page",
    "PaginationMeta",
    "RequestSerializationError",
    "ResponseDecodeError",
    "SendEmailParams",
    "SuppressReason",
    "TransportError",
    "UpdateContactParams",
    "UpdateListParams",
    "UploadUrl",
    "VerificationResult",
    "VerificationStats",
    "VerificationStatus",
    "VerifyEmailParams",
    "__version__",
    "configure_logging",
    "get_retry_after",
    "is_authentication_error",
    "is_not_found_error",
    "is_rate_limit_error",
    "is_server_error",
    "is_validation_error",
]
