"""
Shared fixtures for FastOTP client tests.
"""

from typing import Callable, List

import httpx
import pytest

from fastotp.services.otp_client import AsyncFastOTPClient, FastOTPClient

API_KEY = "test-api-key"
BASE_URL = "https://api.fastotp.co"


@pytest.fixture
def otp_payload() -> dict:
    return {
        "id": "abc123",
        "identifier": "+15550001",
        "type": "numeric",
        "status": "pending",
        "delivery_methods": ["sms", "email"],
        "delivery_details": {
            "sms": {"to": "+15550001", "sent": True},
            "email": {"to": "user@example.com", "attempts": 1},
        },
        "expires_at": "2024-01-01T00:10:00Z",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen) -> Callable[..., FastOTPClient]:
    """Build a blocking client whose transport answers with the given handler."""
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> FastOTPClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        client = FastOTPClient(API_KEY, transport=httpx.MockTransport(_record))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def make_async_client(requests_seen) -> Callable[..., AsyncFastOTPClient]:
    """Build an asyncio client whose transport answers with the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AsyncFastOTPClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return AsyncFastOTPClient(API_KEY, transport=httpx.MockTransport(_record))

    return _make
