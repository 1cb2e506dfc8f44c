import pytest

from azampay.clients.mocks.sandbox import SandboxGateway
from azampay.clients.real_http.gateway import AzamPayClient
from azampay.clients.real_http.session import generate_session
from azampay.contracts.checkout import BankCheckoutPayload, MobileCheckoutPayload
from azampay.contracts.partners import PostCheckoutPayload
from azampay.errors import BadRequestError, InternalServerError, UnauthorizedError, UnexpectedStatusError
from azampay.utils.config_loader import AzamPayKeys


@pytest.fixture
def keys():
    return AzamPayKeys(app_name="demo", client_id="c", client_secret="s", api_key="k")


def _bank_payload():
    return BankCheckoutPayload(
        amount="5000",
        currency_code="TZS",
        merchant_account_number="123",
        merchant_mobile_number="0700000000",
        otp="1111",
        provider="NMB",
        reference_id="REF-7",
    )


def test_full_flow_against_sandbox(keys):
    gateway = SandboxGateway(access_token="sbx")
    http = gateway.client()

    session = generate_session(keys, "sandbox", http_client=http)
    client = AzamPayClient(session, http_client=http)

    bank = client.bank_checkout(_bank_payload())
    mobile = client.mobile_checkout(
        MobileCheckoutPayload(account_number="0700000000", amount="100", currency="TZS", external_id="e", provider="Airtel")
    )
    partners = client.payment_partners()
    url = client.post_checkout(
        PostCheckoutPayload(
            app_name="a", client_id="c", vendor_id="v", language="EN", currency="TZS", external_id="ext-1",
            request_origin="o", redirect_fail_url="f", redirect_success_url="s", vendor_name="n", amount="1",
        )
    )

    assert session.bearer == "sbx"
    assert bank.data.properties.reference_id == "REF-7"
    assert mobile.success is True and mobile.transaction_id
    assert [p.partner_name for p in partners] == ["Azampesa", "Tigopesa"]
    assert url.endswith("/checkout/ext-1")
    assert all(r.headers["Authorization"] == "Bearer sbx" for r in gateway.requests[1:])
    assert len(gateway.requests) == 5


@pytest.mark.parametrize(
    "status_code,error_type",
    [(400, BadRequestError), (417, UnauthorizedError), (500, InternalServerError), (503, UnexpectedStatusError)],
)
def test_forced_failures(keys, status_code, error_type):
    gateway = SandboxGateway(force_status=status_code)
    http = gateway.client()
    client = AzamPayClient(generate_session(keys, http_client=http), http_client=http)

    with pytest.raises(error_type):
        client.bank_checkout(_bank_payload())
