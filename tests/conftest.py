"""Pytest fixtures for gateway client tests."""

import httpx
import pytest

from azampay.clients.real_http.gateway import AzamPayClient
from azampay.contracts.checkout import BankCheckoutPayload
from azampay.contracts.interfaces import SessionContext


class RecordingTransport:
    """Answers every request with a canned response and keeps what was sent."""

    def __init__(self, status_code=200, json=None, content=b""):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def session():
    return SessionContext(base_url="https://sandbox.example.test", bearer="tok-123", api_key="key-456")


@pytest.fixture
def make_client(session):
    """Build a client over a canned transport; returns (client, transport)."""

    def _make(status_code=200, json=None, content=b""):
        transport = RecordingTransport(status_code=status_code, json=json, content=content)
        http = httpx.Client(transport=httpx.MockTransport(transport))
        return AzamPayClient(session, http_client=http), transport

    return _make


@pytest.fixture
def bank_payload():
    return BankCheckoutPayload(
        amount="10000",
        currency_code="TZS",
        merchant_account_number="123321",
        merchant_mobile_number="0700000000",
        merchant_name="somebody",
        otp="1234",
        provider="CRDB",
        reference_id="123",
    )
