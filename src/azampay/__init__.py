"""
AzamPay client SDK.

Typed request/response contracts and a synchronous client for the AzamPay
mobile-money and bank payment gateway:
- mobile (MNO) and bank checkout
- payment partner listing
- callback delivery
- post-checkout redirect URL generation

Example:
    >>> from azampay import AzamPayClient, generate_session, load_keys
    >>> session = generate_session(load_keys("config.json"), "sandbox")
    >>> with AzamPayClient(session) as client:
    ...     partners = client.payment_partners()
"""

from .clients.real_http.gateway import AzamPayClient
from .clients.real_http.session import generate_session
from .contracts import (
    AdditionalProperties,
    BankCheckoutPayload,
    BankCheckoutResponse,
    CallbackPayload,
    CallbackResponse,
    Cart,
    CartItem,
    Environment,
    MobileCheckoutPayload,
    MobileCheckoutResponse,
    PaymentPartner,
    PostCheckoutPayload,
    SessionContext,
)
from .errors import (
    AzamPayError,
    BadRequestError,
    EmptyResponseBodyError,
    GatewayResponseError,
    InternalServerError,
    PayloadSerializationError,
    PayloadValidationError,
    ResponseDecodeError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .utils.config_loader import AzamPayKeys, AzamPaySettings, load_keys, load_settings

__version__ = "0.1.0"

__all__ = [
    # clients
    "AzamPayClient", "generate_session",
    # config
    "AzamPayKeys", "AzamPaySettings", "load_keys", "load_settings",
    # contracts
    "AdditionalProperties", "BankCheckoutPayload", "BankCheckoutResponse",
    "CallbackPayload", "CallbackResponse", "Cart", "CartItem", "Environment",
    "MobileCheckoutPayload", "MobileCheckoutResponse", "PaymentPartner",
    "PostCheckoutPayload", "SessionContext",
    # errors
    "AzamPayError", "BadRequestError", "EmptyResponseBodyError", "GatewayResponseError",
    "InternalServerError", "PayloadSerializationError", "PayloadValidationError",
    "ResponseDecodeError", "UnauthorizedError", "UnexpectedStatusError",
]
