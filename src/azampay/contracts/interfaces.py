from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

class GatewayModel(BaseModel):
    """Base for every wire model. Python names in code, gateway names on the wire."""

    model_config = ConfigDict(populate_by_name=True)


class SessionContext(BaseModel):
    """Authenticated calling context shared by every operation."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    bearer: str
    api_key: str


class AdditionalProperties(GatewayModel):
    property1: str = ""
    property2: str = ""


# ---------------------------------------------------------------------------
# Error bodies
# ---------------------------------------------------------------------------

class BadRequestBody(GatewayModel):
    """Body returned by the gateway with a 400 status."""

    type: str = ""
    title: str = ""
    status: int = 400
    trace_id: str = Field(default="", alias="traceId")
    errors: Dict[str, List[str]] = Field(default_factory=dict)

    def render(self) -> str:
        lines = [
            "Type: " + self.type,
            "Title: " + self.title,
            "Status: " + str(self.status),
            "TraceID: " + self.trace_id,
        ]
        if self.errors:
            details = "; ".join(field + ": " + ", ".join(messages) for field, messages in self.errors.items())
            lines.append("Errors: " + details)
        return "\n".join(lines)


class UnauthorizedBody(GatewayModel):
    """Body returned by the gateway with a 417 status."""

    success: bool = False
    message: str = ""

    def render(self) -> str:
        return "Unauthorized: " + (self.message or "request rejected by gateway")
