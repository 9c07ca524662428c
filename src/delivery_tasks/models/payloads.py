"""
Module: payloads.py
Description: Payload variants for delivery lifecycle tasks.

Each delivery event kind has its own payload model. All of them derive
from TaskPayload, which owns the canonical JSON serialization used for
task bodies.

Key Components:
- TaskPayload: Base model with canonical JSON serialization
- One model per delivery event kind (tracking insert, cancellability,
  log, webhook forward, billing, status change, data change,
  simulated webhook)

Dependencies: pydantic, json, typing
Author: Delivery Platform Team
"""

import json
from typing import Any, Dict, Literal, Optional, Union
from pydantic import ConfigDict, Field, field_validator

from .tracking import DeliveryStatus, Track, WireModel


def canonical_json(data: Any) -> bytes:
    """
    Serialize JSON-compatible data deterministically.

    Keys keep their insertion order, separators are compact and non-ASCII
    characters are written as UTF-8.

    Raises:
        ValueError: If data holds NaN, Infinity or a non-JSON type
    """
    try:
        encoded = json.dumps(
            data,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"payload is not JSON serializable: {e}") from e

    return encoded.encode("utf-8")


class TaskPayload(WireModel):
    """Base class for every delivery task payload."""

    def to_wire(self) -> Dict[str, Any]:
        """
        Dump the payload as it is sent to the delivery functions.

        Uses camelCase aliases and only the fields the caller set, so the
        decoded body matches what the caller passed in.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> bytes:
        """Canonical JSON encoding of to_wire()."""
        return canonical_json(self.to_wire())


class InsertToDeliveryTrackingPayload(TaskPayload):
    """
    New tracking step for the delivery tracking collection.

    Attributes:
        id: Delivery identifier
        status: Delivery status reported by the partner
        tracking_url: Partner tracking page, if any
        track: The tracking step to insert
    """

    id: str = Field(..., min_length=1, description="Delivery identifier")
    status: str = Field(..., description="Delivery status")
    tracking_url: Optional[str] = None
    track: Track


class ForwardingWebhookPayload(InsertToDeliveryTrackingPayload):
    """Delivery partner notification forwarded to the client webhook."""


class IsCancellablePayload(TaskPayload):
    delivery_id: str = Field(..., min_length=1)


class HznProduct(WireModel):
    id: str
    name: str


class LogPayload(TaskPayload):
    """
    Log entry for the delivery log collection.

    Attributes:
        client_id: Client the log belongs to
        category: Log category
        type: Log severity
        target: Whose side the entry concerns
        hzn_product: Product that produced the log
        log: Arbitrary JSON log body
        agent: String map describing the caller, must contain app_name
    """

    client_id: str = Field(..., min_length=1)
    category: Literal["ACTIVITY", "API CALL", "AUTHENTICATION", "WEBHOOK"]
    type: Literal["INFO", "ERROR"]
    target: Literal["HZN", "CLIENT"]
    hzn_product: HznProduct
    log: Any
    agent: Dict[str, str]

    @field_validator('agent')
    @classmethod
    def validate_agent(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Agent maps keep snake_case keys and must name the calling app."""
        if "app_name" not in v:
            raise ValueError("agent must contain app_name")
        return v


class BillingPayload(TaskPayload):
    """
    Billing record for a delivery.

    Unknown keys are forwarded untouched so the billing function can grow
    fields without a client release.
    """

    model_config = ConfigDict(extra="allow")

    delivery_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    currency: Optional[str] = None
    created_at: Optional[int] = Field(default=None, ge=0)


class ChangeDeliveryStatusPayload(TaskPayload):
    delivery_id: str = Field(..., min_length=1)
    status: DeliveryStatus


class ChangeDeliveryDataPayload(TaskPayload):
    """Corrections to an existing delivery. Only set fields are changed."""

    delivery_id: str = Field(..., min_length=1)
    new_delivery_id: Optional[str] = None
    new_amount: Optional[str] = None
    new_delivery_status: Optional[str] = None


class SimulateWebhookPayload(TaskPayload):
    """Request to replay a partner webhook for a delivery in a given status."""

    delivery_id: str = Field(..., min_length=1)
    status: DeliveryStatus
    track: Optional[Track] = None


AnyPayload = Union[
    InsertToDeliveryTrackingPayload,
    ForwardingWebhookPayload,
    IsCancellablePayload,
    LogPayload,
    BillingPayload,
    ChangeDeliveryStatusPayload,
    ChangeDeliveryDataPayload,
    SimulateWebhookPayload,
]
