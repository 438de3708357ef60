"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Support Portal Gateway"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # HubSpot API
    HUBSPOT_ACCESS_TOKEN: Optional[str] = None
    HUBSPOT_BASE_URL: str = "https://api.hubapi.com"
    HUBSPOT_REQUEST_TIMEOUT: int = 30
    HUBSPOT_FILES_FOLDER_ID: str = "250402102515"
    HUBSPOT_FILE_TTL: str = "P3M"  # 3 months
    HUBSPOT_ASSOCIATIONS_PAGE_SIZE: int = 500

    # Support inbox the customer emails are addressed to
    SUPPORT_INBOX_EMAIL: str = "client@goensol.com"
    SUPPORT_INBOX_FIRST_NAME: str = "SAV"
    SUPPORT_INBOX_LAST_NAME: str = "Ensol"

    # Ticket intake
    DEFAULT_PHONE_COUNTRY_CODE: str = "33"
    MAX_TICKET_ATTACHMENTS: int = 6
    ADMIN_EMAIL_DOMAIN: str = "goensol.com"

    # Wizard client
    GATEWAY_BASE_URL: str = "http://localhost:8000/api/v1"
    GATEWAY_REQUEST_TIMEOUT: int = 60
    CONTACT_SESSION_COOKIE_NAME: str = "ensol_contact_session"
    CONTACT_SESSION_MAX_AGE_DAYS: int = 30
    AUTO_SUBMIT_TIMEOUT_SECONDS: float = 10.0

    # Monitoring
    ENABLE_METRICS: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
