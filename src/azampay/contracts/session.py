"""Authenticator contracts used to obtain a bearer token."""

from __future__ import annotations

from pydantic import Field

from .interfaces import GatewayModel


class GenerateTokenPayload(GatewayModel):
    app_name: str = Field(alias="appName")
    client_id: str = Field(alias="clientId")
    client_secret: str = Field(alias="clientSecret")


class TokenData(GatewayModel):
    access_token: str = Field(alias="accessToken")
    expire: str = ""


class TokenResponse(GatewayModel):
    data: TokenData
    message: str = ""
    success: bool = False
    status_code: int = Field(default=200, alias="statusCode")
