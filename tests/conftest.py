"""Pytest fixtures and test doubles for the request pipeline."""

from __future__ import annotations

from typing import Any

import pytest

from core.domain.models import OutboundRequest
from core.services.response_decoder import ResponseDecoder


class StubTransport:
    """Returns the same bytes for every request and records what it was sent."""

    def __init__(self, content: bytes) -> None:
        self.content = content
        self.sent: list[OutboundRequest] = []

    async def send(self, request: OutboundRequest) -> bytes:
        self.sent.append(request)
        return self.content


class FailingTransport:
    """Raises the given error for every request."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.sent: list[OutboundRequest] = []

    async def send(self, request: OutboundRequest) -> bytes:
        self.sent.append(request)
        raise self.error


class RecordingDecoder(ResponseDecoder):
    def __init__(self) -> None:
        self.calls = 0

    def decode(self, response_type: Any, content: bytes) -> Any:
        self.calls += 1
        return super().decode(response_type, content)


@pytest.fixture
def stub_transport():
    return StubTransport


@pytest.fixture
def failing_transport():
    return FailingTransport


@pytest.fixture
def decoder():
    return RecordingDecoder()
