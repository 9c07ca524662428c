"""
Module: conftest.py
Description: Shared pytest fixtures for delivery task creator tests.

Provides test settings, sample payloads and a mocked Cloud Tasks async
client so tests never need credentials or network access.
"""

import base64
import json

import pytest
from unittest.mock import AsyncMock
from google.cloud import tasks_v2

from delivery_tasks.config.settings import Settings
from delivery_tasks.creator import DeliveryTaskCreator
from delivery_tasks.tasks.client import CloudTasksEnqueuer


TEST_PROJECT = "demo-project"


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Disables .env loading for predictable tests.
    """
    return Settings(_env_file=None, project=TEST_PROJECT, log_level="DEBUG")


@pytest.fixture
def decode_body():
    """Provide a helper decoding a base64 task body back into JSON data."""
    def _decode(body: str):
        return json.loads(base64.b64decode(body))
    return _decode


@pytest.fixture
def mock_tasks_client():
    """
    Provide a mocked CloudTasksAsyncClient.

    create_task returns a Task named after the queue path of the request.
    """
    client = AsyncMock(spec=tasks_v2.CloudTasksAsyncClient)

    async def create_task(request):
        return tasks_v2.Task(name=f"{request.parent}/tasks/1234567890")

    client.create_task.side_effect = create_task
    return client


@pytest.fixture
def enqueuer(mock_tasks_client):
    return CloudTasksEnqueuer(client=mock_tasks_client)


@pytest.fixture
def creator(test_settings, enqueuer):
    """Provide a DeliveryTaskCreator for demo-project backed by the mock client."""
    return DeliveryTaskCreator(TEST_PROJECT, enqueuer=enqueuer, settings=test_settings)


@pytest.fixture
def sample_tracking():
    """
    Provide a tracking insert payload in wire shape.

    Matches what delivery partners report for a finished delivery.
    """
    return {
        "id": "1111",
        "status": "COMPLETED",
        "track": {
            "status": "FINISHED",
            "message": "arrived",
            "createdAt": 1700000000,
        },
    }


@pytest.fixture
def sample_tracking_with_courier(sample_tracking):
    tracking = dict(sample_tracking)
    tracking["trackingUrl"] = "https://partner.example.com/track/1111"
    tracking["track"] = {
        **sample_tracking["track"],
        "courier": {
            "name": "Didik M",
            "phone": "0890890980",
            "coordinates": {"latitude": -6.2, "longitude": 106.8},
            "vehicle": {"licensePlate": "B 1234 XYZ", "model": "Vario"},
        },
    }
    return tracking


@pytest.fixture
def sample_log():
    return {
        "clientId": "123123",
        "category": "API CALL",
        "type": "INFO",
        "target": "HZN",
        "hznProduct": {"id": "1", "name": "FLICK"},
        "log": {"request": {"path": "/v1/deliveries"}, "latencyMs": 42},
        "agent": {"app_name": "dashboard", "version": "1.4.0"},
    }
