"""
Module: settings.py
Description: Configuration using pydantic-settings.

Reads the Cloud project, queue location, Cloud Functions region and the
simulate-webhook endpoints from environment variables prefixed with
DELIVERY_TASKS_. Supports .env files for local development.
"""

import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Delivery task creator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DELIVERY_TASKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Read once from the environment when logging is configured at import.
    # Settings passed to DeliveryTaskCreator do not change it.
    log_level: str = Field(
        default="INFO",
        description="Process-wide logging level, read from DELIVERY_TASKS_LOG_LEVEL"
    )

    # Google Cloud settings
    project: Optional[str] = Field(
        default=None,
        description="Google Cloud project that owns the task queues"
    )
    task_location: str = Field(
        default="asia-east1",
        description="Cloud Tasks location hosting every delivery queue"
    )
    function_region: str = Field(
        default="us-central1",
        description="Region of the Cloud Functions that consume the tasks"
    )

    # Simulate-webhook environments
    production_project: str = Field(
        default="hzn-production",
        description="Project id treated as the production environment"
    )
    sandbox_project: str = Field(
        default="hzn-sandbox",
        description="Project id treated as the sandbox environment"
    )
    simulate_webhook_production_url: str = Field(
        default="https://us-central1-hzn-production.cloudfunctions.net/simulateWebhook",
        description="Simulate-webhook endpoint used from production"
    )
    simulate_webhook_sandbox_url: str = Field(
        default="https://us-central1-hzn-sandbox.cloudfunctions.net/simulateWebhook",
        description="Simulate-webhook endpoint used from sandbox"
    )
    simulate_webhook_development_url: str = Field(
        default="https://us-central1-hzn-development.cloudfunctions.net/simulateWebhook",
        description="Simulate-webhook endpoint used from any other project"
    )

    @field_validator('project')
    @classmethod
    def validate_project(cls, v: Optional[str]) -> Optional[str]:
        """Validate the project id looks like a Google Cloud project id."""
        if v is None:
            return v

        if not re.match(r'^[a-z][a-z0-9-]{4,28}[a-z0-9]$', v):
            raise ValueError(
                "project must be 6-30 lowercase letters, digits or hyphens"
            )

        return v

    @field_validator(
        'simulate_webhook_production_url',
        'simulate_webhook_sandbox_url',
        'simulate_webhook_development_url'
    )
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(('http://', 'https://')):
            raise ValueError("webhook URL must be a valid HTTP/HTTPS URL")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


# Global settings instance
settings = Settings()
