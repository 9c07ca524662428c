"""
Package: tasks
Description: Cloud Tasks request building and submission.

Provides the pure TaskRequestBuilder, the per-operation route table and
the CloudTasksEnqueuer that submits built descriptors.
"""

from .builder import TaskRequestBuilder
from .client import CloudTasksEnqueuer, build_create_task_request
from .routes import ROUTES, Route, SimulateWebhookTargets

__all__ = [
    "ROUTES",
    "CloudTasksEnqueuer",
    "Route",
    "SimulateWebhookTargets",
    "TaskRequestBuilder",
    "build_create_task_request",
]
