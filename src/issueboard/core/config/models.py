"""
Configuration data models for issueboard.

These models describe the remote connection and display settings,
with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from issueboard.core.board.labels import DEFAULT_LOCALE, LABELS

SUPPORTED_LOCALES = tuple(LABELS)


class RemoteConfig(BaseModel):
    """
    Connection settings for the hosted reports table.

    The URL and key are the project endpoint and its public (anon) key.
    Both are read once at startup.
    """

    url: str = Field(..., description="Supabase project URL (https://<ref>.supabase.co)")
    key: str = Field(..., description="Public anon key used for read access")
    table: str = Field(default="bug_reports", description="Table holding the reports")

    model_config = ConfigDict(frozen=True)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and strip any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("key", "table")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty strings."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class BoardConfig(BaseModel):
    """
    Root configuration model for issueboard.

    Example:
        >>> config = BoardConfig(
        ...     remote=RemoteConfig(url="https://abc.supabase.co", key="anon-key"),
        ... )
        >>> config.locale
        'zh-TW'
    """

    remote: RemoteConfig
    locale: str = Field(default=DEFAULT_LOCALE, description="Display locale for labels and dates")

    model_config = ConfigDict(frozen=True)

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Only locales with a label table are accepted."""
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"locale must be one of: {', '.join(SUPPORTED_LOCALES)}")
        return v
