"""
Estes integration configuration settings
"""

from datetime import timedelta
from typing import Optional
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from estes_pickup.core.exceptions import ConfigurationError
from estes_pickup.schemas.estes_pickup_schema import EstesCredentials


ESTES_BASE_URL_PROD = "https://api.estes-express.com/tools/pickup/request/v1.0"
ESTES_BASE_URL_SANDBOX = "https://apitest.estes-express.com/tools/pickup/request/v1.0"


class EstesIntegrationSettings(BaseSettings):
    """Estes pickup API configuration settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Sandbox unless production is explicitly requested
    estes_use_production: bool = False

    estes_base_url_prod: str = ESTES_BASE_URL_PROD
    estes_base_url_sandbox: str = ESTES_BASE_URL_SANDBOX

    # Whole round trip bound; Estes can be very slow to answer
    estes_timeout: timedelta = Field(default=timedelta(seconds=10))

    estes_username: Optional[str] = None
    estes_password: Optional[SecretStr] = None

    @field_validator("estes_timeout", mode="before")
    @classmethod
    def parse_timeout_seconds(cls, v):
        """A bare number means seconds; ISO 8601 durations pass through"""
        if isinstance(v, str):
            try:
                return timedelta(seconds=float(v))
            except ValueError:
                return v
        return v

    @property
    def endpoint_url(self) -> str:
        """URL of the pickup endpoint for the selected environment"""
        return self.estes_base_url_prod if self.estes_use_production else self.estes_base_url_sandbox

    def credentials(self) -> EstesCredentials:
        """
        Build Estes credentials from configuration

        Raises:
            ConfigurationError: If username or password is not configured
        """
        missing = []
        if not self.estes_username:
            missing.append("ESTES_USERNAME")
        if self.estes_password is None or not self.estes_password.get_secret_value():
            missing.append("ESTES_PASSWORD")
        if missing:
            raise ConfigurationError(
                f"Missing Estes credentials: {', '.join(missing)}",
                missing=missing
            )

        return EstesCredentials(username=self.estes_username, password=self.estes_password)


@lru_cache()
def get_estes_settings() -> EstesIntegrationSettings:
    """Get cached Estes integration settings instance"""
    return EstesIntegrationSettings()
