"""
Session generation against the AzamPay authenticator.

Exchanges app registration credentials for a bearer token and pairs it with
the checkout base URL of the chosen environment.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

import httpx

from azampay.contracts.interfaces import Environment, SessionContext
from azampay.contracts.session import GenerateTokenPayload, TokenResponse
from azampay.policy.payloads import ensure_required_fields, serialize_payload
from azampay.policy.response_wrappers import model_decoder, parse_gateway_response
from azampay.utils.config_loader import AzamPayKeys

logger = logging.getLogger(__name__)

GENERATE_TOKEN_PATH = "/AppRegistration/GenerateToken"

AUTHENTICATOR_URLS: Dict[Environment, str] = {
    Environment.SANDBOX: "https://authenticator-sandbox.azampay.co.tz",
    Environment.PRODUCTION: "https://authenticator.azampay.co.tz",
}

CHECKOUT_URLS: Dict[Environment, str] = {
    Environment.SANDBOX: "https://sandbox.azampay.co.tz",
    Environment.PRODUCTION: "https://checkout.azampay.co.tz",
}


def resolve_environment(environment: Union[str, Environment]) -> Environment:
    try:
        return Environment(str(getattr(environment, "value", environment)).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown AzamPay environment '{environment}'. Expected 'sandbox' or 'production'."
        ) from None


def generate_session(
    keys: AzamPayKeys,
    environment: Union[str, Environment] = Environment.SANDBOX,
    http_client: Optional[httpx.Client] = None,
    timeout_seconds: float = 20.0,
) -> SessionContext:
    operation = "Generate Session"
    env = resolve_environment(environment)

    payload = GenerateTokenPayload(
        app_name=keys.app_name,
        client_id=keys.client_id,
        client_secret=keys.client_secret,
    )
    ensure_required_fields(payload, operation)
    content = serialize_payload(payload, operation)

    url = AUTHENTICATOR_URLS[env] + GENERATE_TOKEN_PATH
    headers = {"Content-Type": "application/json"}

    logger.info("Generating AzamPay %s session for app=%s", env.value, keys.app_name)
    if http_client is not None:
        response = http_client.post(url, content=content, headers=headers)
    else:
        with httpx.Client(timeout=timeout_seconds) as client:
            response = client.post(url, content=content, headers=headers)

    token: TokenResponse = parse_gateway_response(
        operation, response.status_code, response.content, model_decoder(TokenResponse)
    )
    logger.info("AzamPay session ready (expires %s)", token.data.expire or "unknown")

    return SessionContext(
        base_url=CHECKOUT_URLS[env],
        bearer=token.data.access_token,
        api_key=keys.api_key,
    )
