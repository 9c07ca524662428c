"""
Module: creator.py
Description: Public entry point for enqueuing delivery lifecycle tasks.

DeliveryTaskCreator exposes one coroutine per delivery event kind. Each
one validates its payload, picks the queue and Cloud Function for the
event kind, builds the task descriptor and enqueues it on Cloud Tasks.

Example:
    >>> creator = DeliveryTaskCreator("demo-project")
    >>> await creator.insert_to_delivery_tracking({
    ...     "id": "1111",
    ...     "status": "COMPLETED",
    ...     "track": {"status": "FINISHED", "message": "arrived", "createdAt": 1700000000},
    ... })
    'projects/demo-project/locations/asia-east1/queues/insert-to-delivery-tracking-collection-tmp/tasks/...'
"""

from typing import Any, Dict, Optional, Type, TypeVar, Union

from .config.settings import Settings, settings as default_settings
from .models.payloads import (
    BillingPayload,
    ChangeDeliveryDataPayload,
    ChangeDeliveryStatusPayload,
    ForwardingWebhookPayload,
    InsertToDeliveryTrackingPayload,
    IsCancellablePayload,
    LogPayload,
    SimulateWebhookPayload,
    TaskPayload,
)
from .models.task import TaskDescriptor
from .tasks.builder import TaskRequestBuilder
from .tasks.client import CloudTasksEnqueuer
from .tasks.routes import ROUTES, SimulateWebhookTargets
from .utils.logger import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound=TaskPayload)
PayloadInput = Union[TaskPayload, Dict[str, Any]]


class DeliveryTaskCreator:
    """
    Enqueues delivery lifecycle tasks for a single Cloud project.

    Holds the read-only project configuration and the enqueuer. Calls are
    independent and may run concurrently.
    """

    def __init__(
        self,
        project: str,
        enqueuer: Optional[CloudTasksEnqueuer] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize the creator.

        Args:
            project: Google Cloud project owning the queues and functions
            enqueuer: Enqueuer to submit through, a default one if omitted
            settings: Location, region and simulate-webhook configuration.
                log_level is ignored here, logging is configured process-wide

        Raises:
            ValueError: If project is empty
        """
        self.settings = settings or default_settings
        self.builder = TaskRequestBuilder(project)
        self.enqueuer = enqueuer if enqueuer is not None else CloudTasksEnqueuer()

        self.project = project
        self.location = self.settings.task_location
        self.function_region = self.settings.function_region
        self.simulate_webhook_url = SimulateWebhookTargets.from_settings(
            self.settings
        ).resolve(project)

        logger.info(
            "Delivery task creator initialized",
            project=project,
            location=self.location,
            simulate_webhook_url=self.simulate_webhook_url
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        enqueuer: Optional[CloudTasksEnqueuer] = None
    ) -> "DeliveryTaskCreator":
        """Build a creator for the project named in settings."""
        if not settings.project:
            raise ValueError("settings.project must be set")
        return cls(settings.project, enqueuer=enqueuer, settings=settings)

    @property
    def service_account_email(self) -> str:
        """Service account asserted in the OIDC token of every task."""
        return self.builder.service_account_email

    def build_request(
        self,
        payload: PayloadInput,
        location: str,
        queue_name: str,
        url: str
    ) -> TaskDescriptor:
        return self.builder.build_request(payload, location, queue_name, url)

    async def submit(
        self,
        payload: PayloadInput,
        location: str,
        queue_name: str,
        url: str
    ) -> str:
        """
        Build a task for payload and enqueue it.

        Returns:
            Name of the created task

        Raises:
            EnqueueError: If Cloud Tasks fails to create the task
            ValueError: If any argument is invalid
        """
        descriptor = self.build_request(payload, location, queue_name, url)
        return await self.enqueuer.create_task(descriptor)

    async def _submit_route(self, operation: str, payload: TaskPayload, url: Optional[str] = None) -> str:
        route = ROUTES[operation]
        if url is None:
            url = route.function_url(self.project, self.function_region)

        logger.debug(
            "Enqueuing delivery task",
            operation=operation,
            queue_name=route.queue_name,
            url=url
        )

        return await self.submit(payload, self.location, route.queue_name, url)

    @staticmethod
    def _coerce(model: Type[P], payload: PayloadInput) -> P:
        return model.model_validate(payload)

    async def insert_to_delivery_tracking(self, payload: PayloadInput) -> str:
        """
        Insert a tracking step into the delivery tracking collection.

        Args:
            payload: InsertToDeliveryTrackingPayload or its wire-shaped dict

        Returns:
            Name of the created task
        """
        return await self._submit_route(
            "insert_to_delivery_tracking",
            self._coerce(InsertToDeliveryTrackingPayload, payload)
        )

    async def update_is_cancellable(self, payload: PayloadInput) -> str:
        """Refresh the is-cancellable flag of a delivery's order."""
        return await self._submit_route(
            "update_is_cancellable",
            self._coerce(IsCancellablePayload, payload)
        )

    async def insert_log(self, payload: PayloadInput) -> str:
        """
        Insert a log entry.

        Args:
            payload: LogPayload or its wire-shaped dict

        Returns:
            Name of the created task
        """
        return await self._submit_route("insert_log", self._coerce(LogPayload, payload))

    async def forwarding_webhook(self, payload: PayloadInput) -> str:
        """Forward a delivery partner notification to the client's webhook."""
        return await self._submit_route(
            "forwarding_webhook",
            self._coerce(ForwardingWebhookPayload, payload)
        )

    async def create_billing(self, payload: PayloadInput) -> str:
        """Create a billing record for a delivery."""
        return await self._submit_route("create_billing", self._coerce(BillingPayload, payload))

    async def change_delivery_status(self, payload: PayloadInput) -> str:
        """
        Change the status of a delivery.

        Args:
            payload: ChangeDeliveryStatusPayload or its wire-shaped dict

        Returns:
            Name of the created task
        """
        return await self._submit_route(
            "change_delivery_status",
            self._coerce(ChangeDeliveryStatusPayload, payload)
        )

    async def change_delivery_data(self, payload: PayloadInput) -> str:
        """Correct the id, amount or status of a delivery."""
        return await self._submit_route(
            "change_delivery_data",
            self._coerce(ChangeDeliveryDataPayload, payload)
        )

    async def simulate_webhook(self, payload: PayloadInput) -> str:
        """
        Replay a partner webhook for a delivery.

        Targets the simulator of the environment this creator was built
        for (production, sandbox or development).
        """
        return await self._submit_route(
            "simulate_webhook",
            self._coerce(SimulateWebhookPayload, payload),
            url=self.simulate_webhook_url
        )
