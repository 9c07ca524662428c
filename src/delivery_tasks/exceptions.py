"""
Module: exceptions.py
Description: Errors raised by the delivery task creator.
"""

from typing import Optional


class DeliveryTaskError(Exception):
    """Base class for delivery task creator errors."""


class EnqueueError(DeliveryTaskError):
    """
    Cloud Tasks refused or failed to create a task.

    Covers network, authentication, quota and malformed-request failures.
    The underlying google.api_core error is chained as __cause__.

    Attributes:
        queue_path: Queue the task was addressed to
        error_code: HTTP status reported by Cloud Tasks, if any
    """

    def __init__(self, message: str, queue_path: str, error_code: Optional[int] = None):
        super().__init__(message)
        self.queue_path = queue_path
        self.error_code = error_code
