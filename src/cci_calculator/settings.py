"""Service settings for the CCI calculator.

All values can be overridden through environment variables with the
CCI_ prefix, e.g. ``CCI_LOG_LEVEL=DEBUG``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from cci_calculator.core.index import DEFAULT_IMPROVEMENT_AREA_LIMIT, DEFAULT_ORGANIZATION


class Settings(BaseSettings):
    """Settings for cscrf-cci-calculator.

    Environment variable prefix: CCI_
    """

    service_name: str = "cscrf-cci-calculator"
    version: str = "0.1.0"
    api_prefix: str = "/api/v1"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Scoring and reporting
    default_organization: str = DEFAULT_ORGANIZATION
    improvement_area_limit: int = DEFAULT_IMPROVEMENT_AREA_LIMIT
    compliance_threshold: float = 60.0

    # Demonstration data; unset means a fresh random sample on every call
    sample_seed: int | None = None

    model_config = SettingsConfigDict(env_prefix="CCI_")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
