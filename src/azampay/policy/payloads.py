"""Payload checks and encoding shared by every gateway operation.

Required fields are whatever the payload model declares without a default, so
the same scan works for every operation's payload type. A required string
field holding "" fails the check; optional fields are never rejected.
"""

from __future__ import annotations

import json
from typing import Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from azampay.errors import PayloadSerializationError, PayloadValidationError


def missing_required_field(payload: BaseModel) -> Optional[str]:
    """Return the first empty required field name, in declaration order."""
    for name, info in type(payload).model_fields.items():
        if not info.is_required():
            continue
        value = getattr(payload, name)
        if isinstance(value, str) and value == "":
            return name
    return None


def ensure_required_fields(payload: BaseModel, operation: str) -> None:
    field = missing_required_field(payload)
    if field is not None:
        raise PayloadValidationError(field, operation=operation)


def serialize_payload(payload: BaseModel, operation: str) -> bytes:
    try:
        data = payload.model_dump(mode="json", by_alias=True)
        return json.dumps(data).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as exc:
        raise PayloadSerializationError(
            f"({operation}) Error encoding payload: {exc}", operation=operation
        ) from exc
