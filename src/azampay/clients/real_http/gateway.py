"""
Real AzamPay HTTP Client.

Purpose:
- Sends checkout, callback, partner and post-checkout requests to the gateway
- Maps every reply to a typed contract or a typed error (see azampay.errors)

Every operation follows the same sequence:
validate required fields -> encode JSON -> authenticated request -> classify
status -> decode. One request per call, no retries.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import BaseModel

from azampay.contracts.checkout import (
    BankCheckoutPayload,
    BankCheckoutResponse,
    MobileCheckoutPayload,
    MobileCheckoutResponse,
)
from azampay.contracts.interfaces import SessionContext
from azampay.contracts.partners import (
    CallbackPayload,
    CallbackResponse,
    PaymentPartner,
    PostCheckoutPayload,
)
from azampay.policy.payloads import ensure_required_fields, serialize_payload
from azampay.policy.response_wrappers import decode_redirect_url, model_decoder, parse_gateway_response

logger = logging.getLogger(__name__)

BANK_CHECKOUT_PATH = "/azampay/bank/checkout"
MOBILE_CHECKOUT_PATH = "/azampay/mno/checkout"
PAYMENT_PARTNERS_PATH = "/api/v1/Partner/GetPaymentPartners"
POST_CHECKOUT_PATH = "/api/v1/Partner/PostCheckout"


class AzamPayClient:
    """
    Synchronous client for the AzamPay checkout API.

    Parameters
    ----------
    session : SessionContext
        Base URL, bearer token and API key. Read on every call, never modified.
    http_client : httpx.Client, optional
        Transport to use. When omitted the client creates (and owns) one.
    timeout_seconds : float
        Timeout for the owned transport. Ignored when `http_client` is given.
    """

    def __init__(
        self,
        session: SessionContext,
        http_client: Optional[httpx.Client] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.session = session
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "AzamPayClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def bank_checkout(self, payload: BankCheckoutPayload) -> BankCheckoutResponse:
        return self._execute(
            "Bank Checkout",
            "POST",
            self._url(BANK_CHECKOUT_PATH),
            payload,
            model_decoder(BankCheckoutResponse),
        )

    def mobile_checkout(self, payload: MobileCheckoutPayload) -> MobileCheckoutResponse:
        return self._execute(
            "Mobile Checkout",
            "POST",
            self._url(MOBILE_CHECKOUT_PATH),
            payload,
            model_decoder(MobileCheckoutResponse),
        )

    def callback(self, payload: CallbackPayload, url: str) -> CallbackResponse:
        """Deliver a transaction notification to an absolute callback URL."""
        return self._execute("Callback", "POST", url, payload, model_decoder(CallbackResponse))

    def payment_partners(self) -> List[PaymentPartner]:
        """The only bodyless operation: a GET, so there is no payload to validate."""
        return self._execute(
            "Payment Partners",
            "GET",
            self._url(PAYMENT_PARTNERS_PATH),
            None,
            model_decoder(List[PaymentPartner]),
        )

    def post_checkout(self, payload: PostCheckoutPayload) -> str:
        """Return the URL of the hosted checkout page for this cart."""
        return self._execute(
            "Post Checkout",
            "POST",
            self._url(POST_CHECKOUT_PATH),
            payload,
            decode_redirect_url,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return self.session.base_url.rstrip("/") + path

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.session.bearer}",
            "X-API-KEY": self.session.api_key,
            "Content-Type": "application/json",
        }

    def _execute(
        self,
        operation: str,
        method: str,
        url: str,
        payload: Optional[BaseModel],
        decode: Callable[[str, bytes], Any],
    ) -> Any:
        content = None
        if payload is not None:
            ensure_required_fields(payload, operation)
            content = serialize_payload(payload, operation)

        logger.debug("[%s] %s %s", operation, method, url)
        response = self._http.request(method, url, content=content, headers=self._headers())
        logger.debug("[%s] status=%s", operation, response.status_code)

        return parse_gateway_response(operation, response.status_code, response.content, decode)
