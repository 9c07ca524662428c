"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains all data models used by the delivery task creator:
- Payload variants, one per delivery event kind
- Tracking sub-records and the DeliveryStatus enum
- TaskDescriptor handed to Cloud Tasks
"""

from .payloads import (
    AnyPayload,
    BillingPayload,
    ChangeDeliveryDataPayload,
    ChangeDeliveryStatusPayload,
    ForwardingWebhookPayload,
    HznProduct,
    InsertToDeliveryTrackingPayload,
    IsCancellablePayload,
    LogPayload,
    SimulateWebhookPayload,
    TaskPayload,
    canonical_json,
)
from .task import HttpRequestSpec, OidcToken, TaskDescriptor
from .tracking import Coordinates, Courier, DeliveryStatus, Track, Vehicle

__all__ = [
    "AnyPayload",
    "BillingPayload",
    "ChangeDeliveryDataPayload",
    "ChangeDeliveryStatusPayload",
    "Coordinates",
    "Courier",
    "DeliveryStatus",
    "ForwardingWebhookPayload",
    "HttpRequestSpec",
    "HznProduct",
    "InsertToDeliveryTrackingPayload",
    "IsCancellablePayload",
    "LogPayload",
    "OidcToken",
    "SimulateWebhookPayload",
    "TaskDescriptor",
    "TaskPayload",
    "Track",
    "Vehicle",
    "canonical_json",
]
