"""
Partner contracts: callback delivery, payment partner listing and the hosted
post-checkout page.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .interfaces import AdditionalProperties, GatewayModel


class CallbackPayload(GatewayModel):
    """Transaction notification forwarded to a merchant callback URL."""

    msisdn: str
    amount: str
    message: str
    utility_ref: str = Field(alias="utilityref")
    operator: str
    reference: str
    transaction_status: str = Field(alias="transactionstatus")
    submerchant_acc: str = Field(alias="submerchantAcc")
    additional_properties: AdditionalProperties = Field(
        default_factory=AdditionalProperties, alias="additionalProperties"
    )


class CallbackResponse(GatewayModel):
    success: bool


class PaymentPartner(GatewayModel):
    id: str = ""
    logo_url: str = Field(default="", alias="logoUrl")
    partner_name: str = Field(default="", alias="partnerName")
    provider: int = 0
    vendor_name: str = Field(default="", alias="vendorName")
    payment_vendor_id: str = Field(default="", alias="paymentVendorId")
    payment_partner_id: str = Field(default="", alias="paymentPartnerId")
    currency: str = ""


class CartItem(GatewayModel):
    name: str


class Cart(GatewayModel):
    items: List[CartItem] = Field(default_factory=list)


class PostCheckoutPayload(GatewayModel):
    app_name: str = Field(alias="appName")
    client_id: str = Field(alias="clientId")
    vendor_id: str = Field(alias="vendorId")
    language: str                        # EN or SW
    currency: str
    # 30 characters
    external_id: str = Field(alias="externalId")
    request_origin: str = Field(alias="requestOrigin")
    redirect_fail_url: str = Field(alias="redirectFailURL")
    redirect_success_url: str = Field(alias="redirectSuccessURL")
    vendor_name: str = Field(alias="vendorName")
    amount: str
    cart: Cart = Field(default_factory=Cart)
