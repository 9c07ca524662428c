"""
Package: delivery_tasks
Description: Enqueues delivery lifecycle tasks on Google Cloud Tasks.

Exports DeliveryTaskCreator, the payload models and the errors raised
when a task cannot be created.
"""

from .creator import DeliveryTaskCreator
from .exceptions import DeliveryTaskError, EnqueueError
from .models import (
    BillingPayload,
    ChangeDeliveryDataPayload,
    ChangeDeliveryStatusPayload,
    Courier,
    DeliveryStatus,
    ForwardingWebhookPayload,
    InsertToDeliveryTrackingPayload,
    IsCancellablePayload,
    LogPayload,
    SimulateWebhookPayload,
    TaskDescriptor,
    Track,
)
from .tasks import CloudTasksEnqueuer, TaskRequestBuilder

__all__ = [
    "BillingPayload",
    "ChangeDeliveryDataPayload",
    "ChangeDeliveryStatusPayload",
    "CloudTasksEnqueuer",
    "Courier",
    "DeliveryStatus",
    "DeliveryTaskCreator",
    "DeliveryTaskError",
    "EnqueueError",
    "ForwardingWebhookPayload",
    "InsertToDeliveryTrackingPayload",
    "IsCancellablePayload",
    "LogPayload",
    "SimulateWebhookPayload",
    "TaskDescriptor",
    "TaskRequestBuilder",
    "Track",
]
