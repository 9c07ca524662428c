"""
Module: client.py
Description: Cloud Tasks client for delivery task submission.

Submits built TaskDescriptors through the Cloud Tasks async client and
maps the outcome to the created task name or an EnqueueError.
"""

from typing import Optional

from google.api_core.exceptions import GoogleAPICallError, GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import tasks_v2

from ..exceptions import EnqueueError
from ..models.task import TaskDescriptor
from ..utils.logger import get_logger

logger = get_logger(__name__)


def build_create_task_request(descriptor: TaskDescriptor) -> tasks_v2.CreateTaskRequest:
    """
    Convert a descriptor to the request accepted by create_task.

    The client library base64 encodes bytes fields on the wire itself, so
    the body is handed over as the raw JSON bytes.
    """
    http_request = descriptor.http_request
    return tasks_v2.CreateTaskRequest(
        parent=descriptor.parent,
        task=tasks_v2.Task(
            http_request=tasks_v2.HttpRequest(
                http_method=tasks_v2.HttpMethod[http_request.http_method],
                url=http_request.url,
                headers=dict(http_request.headers),
                body=http_request.decoded_body(),
                oidc_token=tasks_v2.OidcToken(
                    service_account_email=http_request.oidc_token.service_account_email
                )
            )
        )
    )


class CloudTasksEnqueuer:
    """
    Enqueues task descriptors on Cloud Tasks.

    The async client may be injected (tests pass a mock). Otherwise it is
    created on first use so building an enqueuer needs no credentials.
    """

    def __init__(self, client: Optional[tasks_v2.CloudTasksAsyncClient] = None):
        """
        Initialize the enqueuer.

        Args:
            client: Cloud Tasks async client to submit through
        """
        self._client = client

        logger.info(
            "Cloud Tasks enqueuer initialized",
            injected_client=client is not None
        )

    @property
    def client(self) -> tasks_v2.CloudTasksAsyncClient:
        if self._client is None:
            self._client = tasks_v2.CloudTasksAsyncClient()
        return self._client

    async def create_task(self, descriptor: TaskDescriptor) -> str:
        """
        Create a task from a descriptor.

        Args:
            descriptor: Task to create

        Returns:
            Name of the created task

        Raises:
            EnqueueError: If Cloud Tasks rejects or fails the request, or
                credentials cannot be found or refreshed
            ValueError: If descriptor is not a TaskDescriptor
        """
        if not isinstance(descriptor, TaskDescriptor):
            raise ValueError("descriptor must be a TaskDescriptor instance")

        request = build_create_task_request(descriptor)

        try:
            response = await self.client.create_task(request=request)

        except GoogleAPICallError as e:
            error_code = int(e.code) if e.code is not None else None
            logger.error(
                "Failed to create task",
                queue_path=descriptor.parent,
                url=descriptor.http_request.url,
                error_code=error_code,
                error_message=e.message
            )
            raise EnqueueError(
                f"Failed to create task in {descriptor.parent}: {e.message}",
                queue_path=descriptor.parent,
                error_code=error_code
            ) from e

        except GoogleAPIError as e:
            logger.error(
                "Unexpected error creating task",
                queue_path=descriptor.parent,
                url=descriptor.http_request.url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise EnqueueError(
                f"Failed to create task in {descriptor.parent}: {e}",
                queue_path=descriptor.parent
            ) from e

        except GoogleAuthError as e:
            logger.error(
                "Failed to authenticate to Cloud Tasks",
                queue_path=descriptor.parent,
                url=descriptor.http_request.url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise EnqueueError(
                f"Failed to authenticate creating task in {descriptor.parent}: {e}",
                queue_path=descriptor.parent
            ) from e

        logger.info(
            "Created task",
            task_name=response.name,
            queue_path=descriptor.parent
        )

        return response.name
