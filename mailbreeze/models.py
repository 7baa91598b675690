from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")


class ApiModel(BaseModel):
    """wire에서는 camelCase를 쓰고 파이썬 속성은 snake_case로 둬요. 둘 다 입력으로 받아요."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PaginationMeta(ApiModel):
    page: int = 0
    limit: int = 0
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False


class Page(ApiModel, Generic[ItemT]):
    # 엔드포인트에 따라 {data, pagination} 또는 {items, meta} 모양으로 와요.
    items: list[ItemT] = Field(default_factory=list, validation_alias=AliasChoices("items", "data"))
    pagination: PaginationMeta = Field(
        default_factory=PaginationMeta,
        validation_alias=AliasChoices("pagination", "meta"),
    )


# Emails


class EmailStatus(str, Enum):
    PENDING = "pending"
    QUEUED = "queued"
    SENT = "sent"
    DELIVERED = "delivered"
    BOUNCED = "bounced"
    COMPLAINED = "complained"
    FAILED = "failed"


class Email(ApiModel):
    id: str
    from_: str = Field(default="", alias="from")
    to: list[str] = Field(default_factory=list)
    cc: list[str] | None = None
    bcc: list[str] | None = None
    subject: str | None = None
    status: str = ""
    message_id: str | None = None
    template_id: str | None = None
    created_at: datetime | None = None
    sent_at: datetime | None = None
    delivered_at: datetime | None = None
    opened_at: datetime | None = None
    clicked_at: datetime | None = None


class SendEmailParams(ApiModel):
    from_: str = Field(alias="from")
    to: list[str]
    subject: str | None = None
    html: str | None = None
    text: str | None = None
    template_id: str | None = None
    variables: dict[str, Any] | None = None
    attachment_ids: list[str] | None = None
    reply_to: str | None = None
    cc: list[str] | None = None
    bcc: list[str] | None = None
    headers: dict[str, str] | None = None
    tags: list[str] | None = None


class ListEmailsParams(ApiModel):
    status: EmailStatus | None = None
    page: int | None = None
    limit: int | None = None


class EmailStats(ApiModel):
    total: int = 0
    sent: int = 0
    failed: int = 0
    transactional: int = 0
    marketing: int = 0
    success_rate: float = 0.0


class EmailStatsResponse(ApiModel):
    stats: EmailStats = Field(default_factory=EmailStats)


# Contact lists


class MailingList(ApiModel):
    id: str
    name: str = ""
    description: str | None = None
    contact_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateListParams(ApiModel):
    name: str
    description: str | None = None


class UpdateListParams(ApiModel):
    name: str | None = None
    description: str | None = None


class ListListsParams(ApiModel):
    page: int | None = None
    limit: int | None = None
    search: str | None = None


class ListStats(ApiModel):
    total_contacts: int = 0
    active_contacts: int = 0
    unsubscribed_contacts: int = 0
    bounced_contacts: int = 0
    complained_contacts: int = 0
    suppressed_contacts: int = 0


# Contacts


class ContactStatus(str, Enum):
    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"
    COMPLAINED = "complained"
    SUPPRESSED = "suppressed"


class ConsentType(str, Enum):
    """NDPR 동의 유형이에요."""

    EXPLICIT = "explicit"
    IMPLICIT = "implicit"
    LEGITIMATE_INTEREST = "legitimate_interest"


class SuppressReason(str, Enum):
    MANUAL = "manual"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"
    COMPLAINED = "complained"
    SPAM_TRAP = "spam_trap"


class Contact(ApiModel):
    id: str
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    status: str = ""
    custom_fields: dict[str, Any] | None = None
    source: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    subscribed_at: datetime | None = None
    unsubscribed_at: datetime | None = None
    consent_type: str | None = None
    consent_source: str | None = None
    consent_timestamp: datetime | None = None
    consent_ip_address: str | None = None


class CreateContactParams(ApiModel):
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    custom_fields: dict[str, Any] | None = None
    source: str | None = None
    consent_type: ConsentType | None = None
    consent_source: str | None = None
    consent_timestamp: datetime | None = None
    consent_ip_address: str | None = None


class UpdateContactParams(ApiModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    custom_fields: dict[str, Any] | None = None
    consent_type: ConsentType | None = None
    consent_source: str | None = None
    consent_timestamp: datetime | None = None
    consent_ip_address: str | None = None


class ListContactsParams(ApiModel):
    status: ContactStatus | None = None
    page: int | None = None
    limit: int | None = None
    search: str | None = None


# Verification


class VerificationStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    RISKY = "risky"
    UNKNOWN = "unknown"


class VerificationDetails(ApiModel):
    is_free_provider: bool = False
    is_disposable: bool = False
    is_role_account: bool = False
    has_mx_records: bool = False
    is_spam_trap: bool = False


class VerificationResult(ApiModel):
    email: str
    is_valid: bool = False
    result: str = ""
    reason: str | None = None
    cached: bool = False
    risk_score: int = 0
    details: VerificationDetails | None = None


class BatchResults(ApiModel):
    """결과가 모두 캐시에 있어서 즉시 돌아올 때의 분류 묶음이에요."""

    clean: list[str] = Field(default_factory=list)
    dirty: list[str] = Field(default_factory=list)
    unknown: list[str] = Field(default_factory=list)


class BatchVerificationAnalytics(ApiModel):
    valid: int = 0
    invalid: int = 0
    risky: int = 0
    unknown: int = 0


class BatchVerificationResult(ApiModel):
    verification_id: str = ""
    status: str = ""
    total_emails: int = 0
    processed_emails: int = 0
    credits_deducted: int = 0
    # 목록 모양을 먼저 시도하고 실패하면 분류 묶음으로 해석해요.
    results: list[VerificationResult] | BatchResults | None = Field(default=None, union_mode="left_to_right")
    analytics: BatchVerificationAnalytics | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None


class VerificationStats(ApiModel):
    total_verified: int = 0
    total_valid: int = 0
    total_invalid: int = 0
    total_unknown: int = 0
    total_verifications: int = 0
    valid_percentage: float = 0.0


class VerifyEmailParams(ApiModel):
    email: str


class ListVerificationsParams(ApiModel):
    page: int | None = None
    limit: int | None = None
    status: str | None = None


# Attachments


class CreateUploadParams(ApiModel):
    filename: str
    content_type: str
    size: int = Field(default=0, ge=0)
    inline: bool | None = None


class UploadUrl(ApiModel):
    attachment_id: str
    upload_url: str
    upload_token: str = ""
    expires_at: datetime | None = None


class Attachment(ApiModel):
    id: str
    filename: str = ""
    content_type: str = ""
    size: int = 0
    status: str = ""
    created_at: datetime | None = None


# Automations. 이 엔드포인트는 wire에서도 snake_case를 써요.


class EnrollmentStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EnrollParams(BaseModel):
    automation_id: str
    contact_id: str
    variables: dict[str, Any] | None = None


class Enrollment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    automation_id: str = ""
    contact_id: str = ""
    status: str = ""
    current_step: int = 0
    created_at: datetime | None = None


class ListEnrollmentsParams(BaseModel):
    automation_id: str | None = None
    status: EnrollmentStatus | None = None
    page: int | None = None
    limit: int | None = None


class CancelEnrollmentResult(BaseModel):
    id: str = ""
    cancelled: bool = False
