"""
Module: test_settings.py
Description: Unit tests for Settings validation and environment loading.
"""

import pytest
from pydantic import ValidationError

from delivery_tasks.config.settings import Settings


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.task_location == "asia-east1"
        assert settings.function_region == "us-central1"
        assert settings.production_project == "hzn-production"
        assert settings.sandbox_project == "hzn-sandbox"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("DELIVERY_TASKS_PROJECT", "hzn-sandbox")
        monkeypatch.setenv("DELIVERY_TASKS_TASK_LOCATION", "europe-west1")

        settings = Settings(_env_file=None)

        assert settings.project == "hzn-sandbox"
        assert settings.task_location == "europe-west1"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(_env_file=None, log_level="VERBOSE")

    @pytest.mark.parametrize("project", ["Demo-Project", "abc", "demo_project", "demo-project-"])
    def test_invalid_project(self, project):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, project=project)

    def test_invalid_webhook_url(self):
        with pytest.raises(ValidationError, match="webhook URL must be a valid HTTP/HTTPS URL"):
            Settings(_env_file=None, simulate_webhook_development_url="localhost:8080")
