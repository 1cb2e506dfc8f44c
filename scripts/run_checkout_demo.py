#!/usr/bin/env python3
"""
Run every AzamPay operation once and print each result to the terminal.

Uses the real sandbox when a keys file is available, otherwise the in-process
mock gateway.

Usage (from repo root):
  python scripts/run_checkout_demo.py                 # mock gateway
  python scripts/run_checkout_demo.py config.json     # real sandbox
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from pydantic import BaseModel

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from azampay import (
    AdditionalProperties,
    AzamPayClient,
    AzamPayError,
    BankCheckoutPayload,
    CallbackPayload,
    Cart,
    CartItem,
    MobileCheckoutPayload,
    PostCheckoutPayload,
    generate_session,
    load_keys,
    load_settings,
)
from azampay.clients.mocks.sandbox import SandboxGateway
from azampay.utils.config_loader import AzamPayKeys


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, result: BaseModel | str):
    """Print an operation result under a header; models are shown by their wire names."""
    print(f"\n== {title} ==")
    if isinstance(result, BaseModel):
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print(result)


def main() -> int:
    setup_logging()
    settings = load_settings()
    config_path = sys.argv[1] if len(sys.argv) > 1 else settings.config_path

    http_client = None
    if config_path:
        keys = load_keys(config_path)
    else:
        keys = AzamPayKeys(app_name="demo", client_id="demo-client", client_secret="demo-secret", api_key="demo-key")
        http_client = SandboxGateway().client()

    session = generate_session(keys, settings.environment, http_client=http_client)
    client = AzamPayClient(session, http_client=http_client, timeout_seconds=settings.timeout_seconds)

    try:
        mobile = client.mobile_checkout(
            MobileCheckoutPayload(
                account_number="0700000000",
                amount="2000",
                currency="TZS",
                external_id="123",
                provider="Tigo",
                additional_properties=AdditionalProperties(property1="Something", property2="Something else"),
            )
        )
        print_stage("MOBILE CHECKOUT", mobile)

        bank = client.bank_checkout(
            BankCheckoutPayload(
                amount="10000",
                currency_code="TZS",
                merchant_account_number="123321",
                merchant_mobile_number="0700000000",
                merchant_name="somebody",
                otp="1234",
                provider="CRDB",
                reference_id="123",
            )
        )
        print_stage("BANK CHECKOUT", bank)

        # absolute URL of your own callback endpoint
        callback = client.callback(
            CallbackPayload(
                msisdn="0178334",
                amount="2000",
                message="testing callback",
                utility_ref="1282-123",
                operator="Airtel",
                reference="123-123",
                transaction_status="success",
                submerchant_acc="01723113",
            ),
            "http://localhost:8000/api/v1/Checkout/Callback",
        )
        print_stage("CALLBACK", callback)

        partners = client.payment_partners()
        print_stage("PAYMENT PARTNERS", ", ".join(p.partner_name for p in partners))

        url = client.post_checkout(
            PostCheckoutPayload(
                app_name="example",
                client_id="1234",
                vendor_id="e9b57fab-1850-44d4-8499-71fd15c845a0",
                language="SW",
                currency="TZS",
                external_id="30characterslong",
                request_origin="yourorigin",
                redirect_fail_url="yoururl",
                redirect_success_url="yoururl",
                vendor_name="VendorName",
                amount="10000",
                cart=Cart(items=[CartItem(name="Mandazi"), CartItem(name="Sambusa"), CartItem(name="Mkate")]),
            )
        )
        print_stage("POST CHECKOUT URL", url)
    except AzamPayError as exc:
        print_stage("FAILED", str(exc))
        return 1
    finally:
        client.close()
        if http_client is not None:
            http_client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
