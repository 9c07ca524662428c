"""
Module: task.py
Description: Task descriptor handed to Cloud Tasks.

Key Components:
- OidcToken: Identity-token assertion for the destination
- HttpRequestSpec: HTTP request the queue will perform
- TaskDescriptor: Queue path plus HTTP request spec
"""

import base64
from typing import Dict, Literal
from pydantic import BaseModel, ConfigDict, Field


class OidcToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_account_email: str


class HttpRequestSpec(BaseModel):
    """
    HTTP request performed by the queue when the task is dispatched.

    Attributes:
        http_method: Always POST
        url: Destination Cloud Function URL
        body: Base64 encoded JSON payload
        headers: Request headers
        oidc_token: Identity asserted to the destination
    """

    model_config = ConfigDict(frozen=True)

    http_method: Literal["POST"] = "POST"
    url: str
    body: str
    headers: Dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    oidc_token: OidcToken

    def decoded_body(self) -> bytes:
        """Raw JSON bytes carried by the task."""
        return base64.b64decode(self.body)


class TaskDescriptor(BaseModel):
    """A queue-addressed task, created fresh for each enqueue call."""

    model_config = ConfigDict(frozen=True)

    parent: str = Field(..., description="Queue path the task is created in")
    http_request: HttpRequestSpec

