"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the gateway:
- checkout payloads and responses (mobile and bank)
- partner listing, callback and post-checkout shapes
- authenticator token shapes
- error bodies returned on 400 / 417

Why this exists:
- Field names on the wire are fixed by the gateway; these models are the only
  place that mapping lives
- Flows rely on stable models, not on ad-hoc dicts

Both the real HTTP client and the sandbox mock use these contracts.
"""

from .checkout import (
    BankCheckoutData,
    BankCheckoutPayload,
    BankCheckoutResponse,
    BankReference,
    MobileCheckoutPayload,
    MobileCheckoutResponse,
)
from .interfaces import (
    AdditionalProperties,
    BadRequestBody,
    Environment,
    GatewayModel,
    SessionContext,
    UnauthorizedBody,
)
from .partners import (
    CallbackPayload,
    CallbackResponse,
    Cart,
    CartItem,
    PaymentPartner,
    PostCheckoutPayload,
)
from .session import GenerateTokenPayload, TokenData, TokenResponse

__all__ = [
    # interfaces
    "AdditionalProperties", "BadRequestBody", "Environment", "GatewayModel",
    "SessionContext", "UnauthorizedBody",
    # checkout
    "BankCheckoutData", "BankCheckoutPayload", "BankCheckoutResponse", "BankReference",
    "MobileCheckoutPayload", "MobileCheckoutResponse",
    # partners
    "CallbackPayload", "CallbackResponse", "Cart", "CartItem", "PaymentPartner",
    "PostCheckoutPayload",
    # session
    "GenerateTokenPayload", "TokenData", "TokenResponse",
]
