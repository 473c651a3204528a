"""Tests for MessageService send/counters."""

import pytest

from mipush.core.exceptions import InvalidTargetError
from mipush.schemas.notification import IOSMessage


class TestSend:
    @pytest.mark.asyncio
    async def test_send_raw_message(self, service, push_client):
        result = await service.send(reg_id="abc123", message={"sound": "default"})

        assert result == push_client.response
        assert push_client.calls == [
            ("POST", "message/regid", {"sound": "default", "registration_id": "abc123"}, None)
        ]

    @pytest.mark.asyncio
    async def test_send_structured_message(self, service, push_client):
        await service.send(all=True, message=IOSMessage(title="Hello"))

        method, path, params, _ = push_client.calls[0]
        assert method == "POST"
        assert path == "message/all"
        assert params["all"] is True
        assert params["badge"] == 1

    @pytest.mark.asyncio
    async def test_invalid_target_sends_nothing(self, service, push_client):
        with pytest.raises(InvalidTargetError):
            await service.send(message={})
        assert push_client.calls == []


class TestCounters:
    @pytest.mark.asyncio
    async def test_counters(self, service, push_client):
        await service.counters("20170901", "20170930", "com.example.app")

        assert push_client.calls == [
            (
                "GET",
                "stats/message/counters",
                {
                    "start_date": "20170901",
                    "end_date": "20170930",
                    "restricted_package_name": "com.example.app",
                },
                "v1",
            )
        ]
