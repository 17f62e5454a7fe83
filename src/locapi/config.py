# locapi/config.py
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, LOC_BASE_URL
from .types import PostRequestHook, PreRequestHook


class ApiSettings(BaseSettings):
    """
    Manages user-configurable settings for the locapi client, primarily loaded
    from environment variables or a .env file.

    Settings are loaded from environment variables prefixed with 'LOC_API_'
    (e.g. ``LOC_API_BASE_URL`` to point the client at another deployment).
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        env_prefix="LOC_API_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,
        arbitrary_types_allowed=True,  # Allow hook callables
    )

    # --- Deployment ---
    base_url: str = Field(
        default=LOC_BASE_URL,
        description="Authority every request is sent to (scheme and host, optional path prefix)",
    )

    # --- Client Behavior Settings ---
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )
    follow_redirects: bool = Field(
        default=True, description="Follow HTTP redirects issued by loc.gov"
    )

    # --- Hook Settings ---
    pre_request_hooks: list[PreRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call before a request is made.",
    )
    post_request_hooks: list[PostRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call after a response is received and parsed.",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# Create a single, cached instance of settings
@lru_cache
def get_settings() -> ApiSettings:
    """
    Provides access to the application settings.

    Settings are loaded from environment variables (prefixed with 'LOC_API_')
    or .env/secrets.env files. The instance is cached, so the environment is
    read once; call ``get_settings.cache_clear()`` to reload it.

    Returns:
        ApiSettings: The application settings instance.
    """
    return ApiSettings()
