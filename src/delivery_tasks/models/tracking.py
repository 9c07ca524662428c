"""
Module: tracking.py
Description: Tracking sub-records shared by delivery payloads.

Key Components:
- Track: A single tracking step with optional courier details
- Courier, Coordinates, Vehicle: Courier sub-records
- DeliveryStatus: Enum of delivery lifecycle states

Dependencies: pydantic, enum, typing
Author: Delivery Platform Team
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeliveryStatus(str, Enum):
    """Delivery lifecycle states understood by the delivery functions."""

    UNSET = ""
    NEW_ORDER = "NEW ORDER"
    ALLOCATING = "ALLOCATING"
    REJECTED = "REJECTED"
    DRIVER_ASSIGNED = "DRIVER ASSIGNED"
    PICKING_UP = "PICKING UP"
    DRIVER_NOT_FOUND = "DRIVER NOT FOUND"
    ITEM_PICKED = "ITEM PICKED"
    ON_DELIVERY = "ON DELIVERY"
    RECEIVED = "RECEIVED"
    COMPLETED = "COMPLETED"
    REACTIVATED = "REACTIVATED"
    ON_HOLD = "ON HOLD"
    CANCELLED = "CANCELLED"
    DELAYED = "DELAYED"
    EXPIRED = "EXPIRED"
    RETURNED = "RETURNED"
    FAILED = "FAILED"


class WireModel(BaseModel):
    """
    Base for every record sent over the wire.

    Fields are snake_case in Python and camelCase in JSON. Either name is
    accepted on input. Instances are frozen once constructed, and float
    fields reject NaN and Infinity since JSON cannot carry them.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
        extra="forbid"
    )


class Coordinates(WireModel):
    latitude: float
    longitude: float


class Vehicle(WireModel):
    license_plate: Optional[str] = None
    model: Optional[str] = None
    physical_vehicle_type: Optional[str] = None


class Courier(WireModel):
    """Courier handling the delivery at the time of a tracking step."""

    name: str = Field(..., min_length=1, description="Courier name")
    phone: Optional[str] = None
    picture_url: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    vehicle: Optional[Vehicle] = None


class Track(WireModel):
    """
    A single tracking step.

    Attributes:
        status: Partner-side tracking status
        message: Human readable description of the step
        created_at: Epoch timestamp of the step
        courier: Courier details, when the partner reports them
    """

    status: str = Field(..., description="Tracking status")
    message: Optional[str] = None
    created_at: int = Field(..., ge=0, description="Epoch timestamp of the step")
    courier: Optional[Courier] = None
