"""
Module: builder.py
Description: Builds queue-addressed task descriptors.

TaskRequestBuilder turns a delivery payload into the TaskDescriptor
Cloud Tasks needs: the queue path, the POST target, the base64 JSON body,
the JSON content type and the OIDC identity of the project's App Engine
service account. Building is pure; submission lives in client.py.
"""

import base64
from typing import Any, Dict, Union

from google.cloud import tasks_v2

from ..models.payloads import TaskPayload, canonical_json
from ..models.task import HttpRequestSpec, OidcToken, TaskDescriptor


def service_account_for(project: str) -> str:
    """App Engine default service account of a project."""
    return f"{project}@appspot.gserviceaccount.com"


class TaskRequestBuilder:
    """
    Builds TaskDescriptors for a single Cloud project.

    The project and its service account are fixed at construction and
    shared read-only by every build_request call.
    """

    def __init__(self, project: str):
        """
        Initialize the builder.

        Args:
            project: Google Cloud project that owns the queues

        Raises:
            ValueError: If project is empty
        """
        if not project or not isinstance(project, str):
            raise ValueError("project must be a non-empty string")

        self.project = project
        self.service_account_email = service_account_for(project)

    def queue_path(self, location: str, queue_name: str) -> str:
        """Fully-qualified queue path, projects/{p}/locations/{l}/queues/{q}."""
        return tasks_v2.CloudTasksClient.queue_path(self.project, location, queue_name)

    def build_request(
        self,
        payload: Union[TaskPayload, Dict[str, Any]],
        location: str,
        queue_name: str,
        url: str
    ) -> TaskDescriptor:
        """
        Build the task descriptor for a payload.

        Args:
            payload: Payload model, or an already wire-shaped dict
            location: Cloud Tasks location of the queue
            queue_name: Destination queue
            url: Cloud Function the queue will POST to

        Returns:
            TaskDescriptor whose body is the base64 canonical JSON of payload

        Raises:
            ValueError: If any argument is invalid
        """
        if not location or not isinstance(location, str):
            raise ValueError("location must be a non-empty string")
        if not queue_name or not isinstance(queue_name, str):
            raise ValueError("queue_name must be a non-empty string")
        if not isinstance(url, str) or not url.startswith(('http://', 'https://')):
            raise ValueError("url must be a valid HTTP/HTTPS URL")

        if isinstance(payload, TaskPayload):
            body = payload.to_json()
        elif isinstance(payload, dict):
            body = canonical_json(payload)
        else:
            raise ValueError("payload must be a TaskPayload or a dictionary")

        return TaskDescriptor(
            parent=self.queue_path(location, queue_name),
            http_request=HttpRequestSpec(
                url=url,
                body=base64.b64encode(body).decode("ascii"),
                headers={"Content-Type": "application/json"},
                oidc_token=OidcToken(service_account_email=self.service_account_email)
            )
        )
