from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mailbreeze._version import __version__

DEFAULT_BASE_URL = "https://api.mailbreeze.com/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 3
USER_AGENT = f"mailbreeze-python/{__version__}"


class ClientSettings(BaseSettings):
    """클라이언트 하나에 묶이는 설정이에요. 생성한 뒤에는 바꿀 수 없어요."""

    model_config = SettingsConfigDict(
        env_prefix="MAILBREEZE_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_key: SecretStr = SecretStr("")
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
