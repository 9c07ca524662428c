"""
Module: test_routes.py
Description: Unit tests for the route table and simulate-webhook targets.
"""

import pytest

from delivery_tasks.config.settings import Settings
from delivery_tasks.tasks.routes import ROUTES, SimulateWebhookTargets


class TestRoutes:
    """Test cases for the per-operation route table."""

    def test_every_operation_has_a_route(self):
        assert set(ROUTES) == {
            "insert_to_delivery_tracking",
            "update_is_cancellable",
            "insert_log",
            "forwarding_webhook",
            "create_billing",
            "change_delivery_status",
            "change_delivery_data",
            "simulate_webhook",
        }

    def test_queue_names_are_unique(self):
        queue_names = [route.queue_name for route in ROUTES.values()]
        assert len(queue_names) == len(set(queue_names))

    def test_function_url(self):
        url = ROUTES["change_delivery_status"].function_url("demo-project", "us-central1")
        assert url == "https://us-central1-demo-project.cloudfunctions.net/changeDeliveryStatus"


class TestSimulateWebhookTargets:
    """Test cases for environment-dependent simulate-webhook URLs."""

    @pytest.fixture
    def targets(self):
        return SimulateWebhookTargets.from_settings(Settings(_env_file=None))

    def test_production(self, targets):
        assert targets.resolve("hzn-production") == (
            "https://us-central1-hzn-production.cloudfunctions.net/simulateWebhook"
        )

    def test_sandbox(self, targets):
        assert targets.resolve("hzn-sandbox") == (
            "https://us-central1-hzn-sandbox.cloudfunctions.net/simulateWebhook"
        )

    @pytest.mark.parametrize("project", ["demo-project", "hzn-development", "HZN-PRODUCTION", ""])
    def test_anything_else_is_development(self, targets, project):
        assert targets.resolve(project) == (
            "https://us-central1-hzn-development.cloudfunctions.net/simulateWebhook"
        )

    def test_urls_come_from_settings(self):
        settings = Settings(
            _env_file=None,
            sandbox_project="acme-sandbox",
            simulate_webhook_sandbox_url="https://sandbox.example.com/simulate"
        )
        targets = SimulateWebhookTargets.from_settings(settings)

        assert targets.resolve("acme-sandbox") == "https://sandbox.example.com/simulate"
        assert targets.resolve("hzn-sandbox") == targets.development_url
