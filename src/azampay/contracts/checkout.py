"""
Checkout contracts.

Request/response shapes for the two direct checkout operations:
- mobile (MNO) checkout: debit a mobile wallet
- bank checkout: debit a bank account, authorised by an OTP

Fields without a default are required; the client rejects them when empty
before any request is sent. Fields defaulting to "" are optional.
"""

from __future__ import annotations

from pydantic import Field

from .interfaces import AdditionalProperties, GatewayModel


# ---------------------------------------------------------------------------
# Bank checkout
# ---------------------------------------------------------------------------

class BankCheckoutPayload(GatewayModel):
    amount: str
    currency_code: str = Field(alias="currencyCode")
    # account/MSISDN the amount is deducted from
    merchant_account_number: str = Field(alias="merchantAccountNumber")
    merchant_mobile_number: str = Field(alias="merchantMobileNumber")
    merchant_name: str = Field(default="", alias="merchantName")
    otp: str
    provider: str                        # CRDB or NMB
    # at most 128 ascii characters
    reference_id: str = Field(default="", alias="referenceId")
    additional_properties: AdditionalProperties = Field(
        default_factory=AdditionalProperties, alias="additionalProperties"
    )


class BankReference(GatewayModel):
    reference_id: str = Field(default="", alias="ReferenceID")


class BankCheckoutData(GatewayModel):
    properties: BankReference = Field(default_factory=BankReference)


class BankCheckoutResponse(GatewayModel):
    success: bool
    # empty in sandbox
    message: str = Field(default="", alias="msg")
    data: BankCheckoutData = Field(default_factory=BankCheckoutData)


# ---------------------------------------------------------------------------
# Mobile (MNO) checkout
# ---------------------------------------------------------------------------

class MobileCheckoutPayload(GatewayModel):
    account_number: str = Field(alias="accountNumber")
    amount: str
    currency: str
    external_id: str = Field(alias="externalId")
    provider: str                        # Airtel, Tigo, Halopesa, Azampesa, Mpesa
    additional_properties: AdditionalProperties = Field(
        default_factory=AdditionalProperties, alias="additionalProperties"
    )


class MobileCheckoutResponse(GatewayModel):
    success: bool
    message: str = ""
    transaction_id: str = Field(default="", alias="transactionId")
