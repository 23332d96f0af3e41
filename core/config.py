# =============================================================================
# core/config.py  —  Process configuration (validated once, at startup)
# =============================================================================
#
# main.py calls load_dotenv() first, so values may come from a .env file or
# from the real environment.  A missing URL or key is FATAL: the server
# refuses to start rather than failing every tool call later.
# =============================================================================

import re

from pydantic import AnyHttpUrl, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ADMIN_KEY = re.compile(r"^[0-9a-zA-Z]+:[0-9a-fA-F]+$")


class ConfigurationError(RuntimeError):
    """Raised when the environment does not describe a usable Ghost site."""


class GhostSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False)

    ghost_url: AnyHttpUrl
    ghost_admin_api_key: str = Field(min_length=1)
    ghost_content_api_key: str = Field(min_length=1)

    ghost_api_version: str = Field(default="v5.0", min_length=1)
    ghost_http_timeout_seconds: float = Field(default=30.0, gt=0)
    ghost_mcp_log_level: str = "INFO"

    @field_validator("ghost_admin_api_key")
    @classmethod
    def _admin_key_has_id_and_secret(cls, value: str) -> str:
        # Admin keys look like "<key id>:<hex secret>"
        if not _ADMIN_KEY.match(value):
            raise ValueError("expected '<id>:<secret>' as shown in Ghost Admin > Integrations")
        return value

    @property
    def base_url(self) -> str:
        """Site URL without a trailing slash."""
        return str(self.ghost_url).rstrip("/")


def load_settings(**overrides) -> GhostSettings:
    try:
        return GhostSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid Ghost configuration: {problems}") from exc
