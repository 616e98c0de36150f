"""Shared test fixtures for sms-forward-bot."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from smsforward.forwarder.secrets import DeviceSecrets


@dataclass
class RecordedRequest:
    url: str
    headers: dict[str, str]
    body: str

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass
class FakeHttpClient:
    """HttpClient that records requests and returns a canned response."""

    status_code: int = 200
    response: str = '{"ok":true,"result":true}'
    requests: list[RecordedRequest] = field(default_factory=list)

    def post_json(self, url: str, headers: dict[str, str], body: str) -> tuple[int, str]:
        self.requests.append(RecordedRequest(url=url, headers=headers, body=body))
        return self.status_code, self.response


@pytest.fixture
def fake_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def device_secrets() -> DeviceSecrets:
    return DeviceSecrets({
        "phone": "s3cret",
        "phone_bot_token": "123:ABC",
        "phone_chat_id": "-100200",
        "tablet": "t0ken",
    })


def make_filter_query(sender: str = "10086", text: str = "hello") -> bytes:
    """Factory for an Apple message filter request body."""
    return json.dumps({"query": {"sender": sender, "message": {"text": text}}}).encode()
