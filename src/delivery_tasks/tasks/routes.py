"""
Module: routes.py
Description: Queue and destination for each delivery event kind.

Every operation enqueues onto its own queue and targets its own Cloud
Function. Function URLs are derived from the project, except for the
webhook simulator whose URL depends on the deployment environment and is
resolved once when the creator is built.
"""

from typing import Dict
from pydantic import BaseModel, ConfigDict

from ..config.settings import Settings


class Route(BaseModel):
    """Queue and Cloud Function that one delivery event kind is sent to."""

    model_config = ConfigDict(frozen=True)

    queue_name: str
    function_name: str

    def function_url(self, project: str, region: str) -> str:
        """URL of the Cloud Function in the given project and region."""
        return f"https://{region}-{project}.cloudfunctions.net/{self.function_name}"


ROUTES: Dict[str, Route] = {
    "insert_to_delivery_tracking": Route(
        queue_name="insert-to-delivery-tracking-collection-tmp",
        function_name="insertToDeliveryTrackingCollection"
    ),
    "update_is_cancellable": Route(
        queue_name="update-is-cancellable",
        function_name="isDeliveryCancellable"
    ),
    "insert_log": Route(queue_name="insert-log", function_name="insertLog"),
    "forwarding_webhook": Route(
        queue_name="forwarding-webhook",
        function_name="forwardingWebhook"
    ),
    "create_billing": Route(queue_name="create-billing", function_name="createBilling"),
    "change_delivery_status": Route(
        queue_name="change-delivery-status",
        function_name="changeDeliveryStatus"
    ),
    "change_delivery_data": Route(
        queue_name="change-delivery-data",
        function_name="changeDeliveryData"
    ),
    "simulate_webhook": Route(queue_name="simulate-webhook", function_name="simulateWebhook"),
}


class SimulateWebhookTargets(BaseModel):
    """Simulate-webhook endpoint for each deployment environment."""

    model_config = ConfigDict(frozen=True)

    production_project: str
    sandbox_project: str
    production_url: str
    sandbox_url: str
    development_url: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "SimulateWebhookTargets":
        return cls(
            production_project=settings.production_project,
            sandbox_project=settings.sandbox_project,
            production_url=settings.simulate_webhook_production_url,
            sandbox_url=settings.simulate_webhook_sandbox_url,
            development_url=settings.simulate_webhook_development_url
        )

    def resolve(self, project: str) -> str:
        """Production and sandbox projects get their own URL, anything else development."""
        urls = {
            self.production_project: self.production_url,
            self.sandbox_project: self.sandbox_url,
        }
        return urls.get(project, self.development_url)
