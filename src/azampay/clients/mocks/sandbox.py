"""
AzamPay sandbox — MOCK transport.

⚠️  This is a mock implementation for development and testing.
    It answers the authenticator and every checkout path with realistic-looking
    fake data, without any network access. Plug it into the real client:

        gateway = SandboxGateway()
        client = AzamPayClient(session, http_client=gateway.client())

    Set `force_status` to make every checkout path answer with a given status
    code (400, 417, 500, ...) to exercise failure handling.
"""

import json
import logging
import uuid
from typing import Any, Dict, List, Optional

import httpx

from azampay.clients.real_http.gateway import (
    BANK_CHECKOUT_PATH,
    MOBILE_CHECKOUT_PATH,
    PAYMENT_PARTNERS_PATH,
    POST_CHECKOUT_PATH,
)
from azampay.clients.real_http.session import GENERATE_TOKEN_PATH

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_PARTNERS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "logoUrl": "https://sandbox.azampay.co.tz/logos/azampesa.png",
        "partnerName": "Azampesa",
        "provider": 5,
        "vendorName": "Azampesa",
        "paymentVendorId": "2ba4a1fa-2d5a-4a6c-b8e4-1b6f4d1b3d01",
        "paymentPartnerId": "8d1c5c3e-76a1-4e42-a0a1-12a5e9c3c001",
        "currency": "TZS",
    },
    {
        "id": "2",
        "logoUrl": "https://sandbox.azampay.co.tz/logos/tigopesa.png",
        "partnerName": "Tigopesa",
        "provider": 3,
        "vendorName": "Tigo",
        "paymentVendorId": "2ba4a1fa-2d5a-4a6c-b8e4-1b6f4d1b3d02",
        "paymentPartnerId": "8d1c5c3e-76a1-4e42-a0a1-12a5e9c3c002",
        "currency": "TZS",
    },
]

_BAD_REQUEST_BODY: Dict[str, Any] = {
    "type": "https://tools.ietf.org/html/rfc7231#section-6.5.1",
    "title": "One or more validation errors occurred.",
    "status": 400,
    "traceId": "00-sandbox-trace-00",
    "errors": {"amount": ["The amount field is invalid."]},
}

_UNAUTHORIZED_BODY: Dict[str, Any] = {
    "success": False,
    "message": "Invalid token or api key",
}


# ---------------------------------------------------------------------------
# Mock gateway
# ---------------------------------------------------------------------------

class SandboxGateway:
    """
    In-memory stand-in for the AzamPay sandbox.

    Parameters
    ----------
    force_status : int, optional
        When set, every checkout path answers with this status code.
    access_token : str
        Token handed out by the fake authenticator.
    """

    def __init__(self, force_status: Optional[int] = None, access_token: str = "sandbox-token"):
        self.force_status = force_status
        self.access_token = access_token
        self.requests: List[httpx.Request] = []

        logger.info("[AZAMPAY SANDBOX] Gateway initialised (force_status=%s)", force_status)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport())

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        logger.info("[AZAMPAY SANDBOX] %s %s", request.method, path)

        if path == GENERATE_TOKEN_PATH:
            return self._token()

        if self.force_status is not None and self.force_status != 200:
            return self._failure(self.force_status)

        body = json.loads(request.content) if request.content else {}
        if path == BANK_CHECKOUT_PATH:
            return self._bank_checkout(body)
        if path == MOBILE_CHECKOUT_PATH:
            return self._mobile_checkout(body)
        if path == PAYMENT_PARTNERS_PATH:
            return httpx.Response(200, json=list(_MOCK_PARTNERS))
        if path == POST_CHECKOUT_PATH:
            return self._post_checkout(body)
        # anything else is a merchant callback URL
        return httpx.Response(200, json={"success": True})

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _token(self) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "data": {"accessToken": self.access_token, "expire": "2099-01-01T00:00:00Z"},
                "message": "Token generated successfully",
                "success": True,
                "statusCode": 200,
            },
        )

    def _bank_checkout(self, body: Dict[str, Any]) -> httpx.Response:
        reference = body.get("referenceId") or uuid.uuid4().hex[:12].upper()
        return httpx.Response(
            200,
            json={"success": True, "msg": "", "data": {"properties": {"ReferenceID": reference}}},
        )

    def _mobile_checkout(self, body: Dict[str, Any]) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "success": True,
                "message": "Request in progress. You will receive a callback shortly",
                "transactionId": uuid.uuid4().hex,
            },
        )

    def _post_checkout(self, body: Dict[str, Any]) -> httpx.Response:
        external_id = body.get("externalId", "")
        return httpx.Response(200, json=f"https://checkout-sandbox.azampay.co.tz/checkout/{external_id}")

    def _failure(self, status_code: int) -> httpx.Response:
        if status_code == 400:
            return httpx.Response(400, json=_BAD_REQUEST_BODY)
        if status_code == 417:
            return httpx.Response(417, json=_UNAUTHORIZED_BODY)
        return httpx.Response(status_code, text="Service unavailable")
