from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.constructionwire.com/v1"


class ConstructionwireSettings(BaseSettings):
    """Credentials, endpoint and resilience settings for the ConstructionWire API."""

    # ── Credentials ──
    username: str = Field(
        default="",
        validation_alias=AliasChoices("CONSTRUCTIONWIRE_USERNAME", "CONSTRUCTIONWIRE_EMAIL"),
    )
    password: SecretStr = Field(
        default=SecretStr(""),
        alias="CONSTRUCTIONWIRE_PASSWORD",
    )

    # ── Endpoint ──
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        alias="CONSTRUCTIONWIRE_API_BASE_URL",
    )
    request_timeout: float = Field(
        default=30.0,
        alias="CONSTRUCTIONWIRE_REQUEST_TIMEOUT",
        description="Per-request HTTP timeout in seconds",
    )

    # ── Retry policy ──
    max_retries: int = Field(
        default=3,
        alias="CONSTRUCTIONWIRE_MAX_RETRIES",
        description="Additional attempts after the first one; 0 disables retries",
    )
    retry_initial_delay: float = Field(
        default=0.5,
        alias="CONSTRUCTIONWIRE_RETRY_INITIAL_DELAY",
    )
    retry_max_delay: float = Field(
        default=8.0,
        alias="CONSTRUCTIONWIRE_RETRY_MAX_DELAY",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
