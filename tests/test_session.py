import json

import httpx
import pytest
from pydantic import ValidationError

from azampay.clients.real_http.session import generate_session, resolve_environment
from azampay.contracts.interfaces import Environment
from azampay.errors import PayloadValidationError, UnexpectedStatusError
from azampay.utils.config_loader import AzamPayKeys

TOKEN_BODY = {
    "data": {"accessToken": "jwt-abc", "expire": "2030-01-01T00:00:00Z"},
    "message": "Token generated successfully",
    "success": True,
    "statusCode": 200,
}


@pytest.fixture
def keys():
    return AzamPayKeys(app_name="shop", client_id="client-1", client_secret="secret-1", api_key="api-1")


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_generate_session_builds_context_for_sandbox(keys):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=TOKEN_BODY)

    session = generate_session(keys, "sandbox", http_client=_client(handler))

    assert session.base_url == "https://sandbox.azampay.co.tz"
    assert session.bearer == "jwt-abc"
    assert session.api_key == "api-1"

    request = seen[0]
    assert str(request.url) == "https://authenticator-sandbox.azampay.co.tz/AppRegistration/GenerateToken"
    assert json.loads(request.content) == {"appName": "shop", "clientId": "client-1", "clientSecret": "secret-1"}
    assert "Authorization" not in request.headers


def test_generate_session_production_urls(keys):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=TOKEN_BODY)

    session = generate_session(keys, Environment.PRODUCTION, http_client=_client(handler))

    assert session.base_url == "https://checkout.azampay.co.tz"
    assert seen[0].url.host == "authenticator.azampay.co.tz"


def test_session_context_is_immutable(keys):
    session = generate_session(keys, http_client=_client(lambda r: httpx.Response(200, json=TOKEN_BODY)))

    with pytest.raises(ValidationError):
        session.bearer = "other"


def test_rejected_credentials_raise(keys):
    client = _client(lambda r: httpx.Response(423, json={"message": "Invalid detail"}))

    with pytest.raises(UnexpectedStatusError, match="423"):
        generate_session(keys, http_client=client)


def test_empty_credentials_fail_before_request():
    keys = AzamPayKeys.model_construct(app_name="shop", client_id="", client_secret="s", api_key="k")
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=TOKEN_BODY)

    with pytest.raises(PayloadValidationError, match="client_id"):
        generate_session(keys, http_client=_client(handler))

    assert calls == []


@pytest.mark.parametrize("value,expected", [("sandbox", Environment.SANDBOX), (" Production ", Environment.PRODUCTION)])
def test_resolve_environment(value, expected):
    assert resolve_environment(value) is expected


def test_resolve_environment_rejects_unknown():
    with pytest.raises(ValueError, match="staging"):
        resolve_environment("staging")
