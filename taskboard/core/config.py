"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (completion provider, taxonomy
defaults) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_STATUSES = ["New", "Backlog", "To Do", "In Progress", "In Review", "Done", "Completed"]
_DEFAULT_PRIORITIES = ["Highest", "High", "Medium", "Low"]
_DEFAULT_PRODUCT_AREAS = [
    "Core Platform",
    "User Interface",
    "API",
    "Mobile Initiative",
    "Data Analytics",
    "Integrations",
    "Portal",
]
_DEFAULT_EFFORT_SIZES = ["XS", "S", "M", "L", "XL"]
_DEFAULT_TEAM_MEMBERS = ["Zonaid", "Alice", "Bob", "Charlie", "Diana", "Eve", "Foysal"]


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    List-valued settings (taxonomy_*) are read from the environment as JSON
    arrays, e.g. TAXONOMY_PRODUCT_AREAS='["API", "Portal"]'.
    """

    # App
    app_name: str = "taskboard"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (postgresql+asyncpg://...). Empty means SQL is not configured.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    chat_rate_limit: str = "30/minute"

    # Completion service
    completion_provider: str = "gemini"
    completion_model: str = "models/gemini-2.0-flash"
    completion_api_key: SecretStr | None = None
    completion_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    completion_timeout_seconds: float = 30.0
    completion_temperature: float = 0.3
    completion_top_k: int = 1
    completion_top_p: float = 1.0
    completion_max_output_tokens: int = 4096

    # Assistant
    assistant_name: str = "ART3MIS"
    default_speaking_user: str = "User"
    timezone: str = "UTC"
    strict_taxonomy: bool = True
    # When set, proposals are HMAC-signed and confirmations must echo a valid signature.
    proposal_signing_secret: SecretStr | None = None

    # Taxonomy
    taxonomy_statuses: list[str] = _DEFAULT_STATUSES
    taxonomy_closed_statuses: list[str] = ["Done", "Completed"]
    taxonomy_default_status: str = "To Do"
    taxonomy_priorities: list[str] = _DEFAULT_PRIORITIES
    taxonomy_default_priority: str = "Medium"
    taxonomy_product_areas: list[str] = _DEFAULT_PRODUCT_AREAS
    taxonomy_effort_sizes: list[str] = _DEFAULT_EFFORT_SIZES
    taxonomy_team_members: list[str] = _DEFAULT_TEAM_MEMBERS

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_provider_and_taxonomy(self) -> "Settings":
        """Validate completion provider and taxonomy consistency.

        - completion_provider must be a supported provider.
        - taxonomy_statuses and taxonomy_priorities must be non-empty.
        - the default priority must be one of the configured priorities.
        """
        if self.completion_provider != "gemini":
            raise ValueError(
                f"completion_provider must be 'gemini', got: {self.completion_provider!r}"
            )
        if not self.taxonomy_statuses:
            raise ValueError("TAXONOMY_STATUSES must list at least one status.")
        if not self.taxonomy_priorities:
            raise ValueError("TAXONOMY_PRIORITIES must list at least one priority.")
        if self.taxonomy_default_priority not in self.taxonomy_priorities:
            raise ValueError(
                f"TAXONOMY_DEFAULT_PRIORITY {self.taxonomy_default_priority!r} "
                "is not one of TAXONOMY_PRIORITIES."
            )
        if not self.default_speaking_user.strip():
            raise ValueError("DEFAULT_SPEAKING_USER must be a non-empty name.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
