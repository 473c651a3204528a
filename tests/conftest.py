"""Pytest configuration for mipush tests."""

import os

os.environ.setdefault("MIPUSH_APP_SECRET", "test-app-secret")

import pytest  # noqa: E402

from mipush.services.message import message_service  # noqa: E402


class RecordingPushClient:
    """Stands in for PushClient and records every call instead of sending it."""

    def __init__(self, response: dict | None = None):
        self.response = response or {"result": "ok", "code": 0, "data": {"id": "msg-1"}}
        self.calls: list[tuple] = []

    async def post(self, path, params, version=None):
        self.calls.append(("POST", path, params, version))
        return self.response

    async def get(self, path, params, version=None):
        self.calls.append(("GET", path, params, version))
        return self.response


@pytest.fixture
def push_client():
    return RecordingPushClient()


@pytest.fixture
def service(push_client, monkeypatch):
    """The shared MessageService wired to a recording push client."""
    monkeypatch.setattr(message_service, "_push_client", push_client)
    return message_service
