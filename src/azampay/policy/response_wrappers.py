from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable, Dict, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from azampay.contracts.interfaces import BadRequestBody, UnauthorizedBody
from azampay.errors import (
    AzamPayError,
    BadRequestError,
    EmptyResponseBodyError,
    InternalServerError,
    ResponseDecodeError,
    UnauthorizedError,
    UnexpectedStatusError,
)

T = TypeVar("T")


class ResponseKind(str, Enum):
    SUCCESS = "SUCCESS"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    SERVER_ERROR = "SERVER_ERROR"
    UNEXPECTED = "UNEXPECTED"


_STATUS_KINDS: Dict[int, ResponseKind] = {
    200: ResponseKind.SUCCESS,
    400: ResponseKind.BAD_REQUEST,
    417: ResponseKind.UNAUTHORIZED,
    500: ResponseKind.SERVER_ERROR,
}


def classify_status(status_code: int) -> ResponseKind:
    return _STATUS_KINDS.get(status_code, ResponseKind.UNEXPECTED)


def parse_gateway_response(
    operation: str,
    status_code: int,
    body: bytes,
    decode: Callable[[str, bytes], T],
) -> T:
    """
    Map a raw gateway reply to the operation's result.

    Only a 200 reaches `decode`; every other status is turned into the
    matching GatewayResponseError (or a ResponseDecodeError when the error
    body itself cannot be read) and raised.
    """
    kind = classify_status(status_code)
    if kind is ResponseKind.SUCCESS:
        return decode(operation, body)
    raise build_gateway_error(operation, kind, status_code, body)


def build_gateway_error(operation: str, kind: ResponseKind, status_code: int, body: bytes) -> AzamPayError:
    if kind is ResponseKind.BAD_REQUEST:
        try:
            bad_request = decode_model(operation, body, BadRequestBody)
        except ResponseDecodeError as exc:
            return _error_body_unreadable(operation, "bad request", status_code, exc)
        return BadRequestError(
            f"({operation}) {bad_request.render()}",
            operation=operation,
            status_code=status_code,
            payload=bad_request.model_dump(by_alias=True),
        )

    if kind is ResponseKind.UNAUTHORIZED:
        try:
            unauthorized = decode_model(operation, body, UnauthorizedBody)
        except ResponseDecodeError as exc:
            return _error_body_unreadable(operation, "unauthorized", status_code, exc)
        return UnauthorizedError(
            f"({operation}) {unauthorized.render()}",
            operation=operation,
            status_code=status_code,
            payload=unauthorized.model_dump(by_alias=True),
        )

    if kind is ResponseKind.SERVER_ERROR:
        # body is not read; the gateway does not return JSON on 500
        return InternalServerError(
            f"({operation}) Internal Server Error: status code {status_code}",
            operation=operation,
            status_code=status_code,
        )

    return UnexpectedStatusError(
        f"({operation}) Error: status code {status_code}",
        operation=operation,
        status_code=status_code,
    )


def decode_json(operation: str, body: bytes) -> Any:
    if not body or not body.strip():
        raise EmptyResponseBodyError(operation=operation)
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ResponseDecodeError(str(exc), operation=operation) from exc


def decode_model(operation: str, body: bytes, response_type: Any) -> Any:
    data = decode_json(operation, body)
    try:
        if isinstance(response_type, type) and issubclass(response_type, BaseModel):
            return response_type.model_validate(data)
        return TypeAdapter(response_type).validate_python(data)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"({operation}) Response validation failed: {exc}", operation=operation
        ) from exc


def model_decoder(response_type: Any) -> Callable[[str, bytes], Any]:
    def _decode(operation: str, body: bytes) -> Any:
        return decode_model(operation, body, response_type)

    return _decode


def decode_redirect_url(operation: str, body: bytes) -> str:
    """The post-checkout endpoint answers with the URL as a JSON string or as plain text."""
    if not body or not body.strip():
        raise EmptyResponseBodyError(operation=operation)
    try:
        text = body.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise ResponseDecodeError(str(exc), operation=operation) from exc
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        if _is_web_url(text):
            return text
        raise ResponseDecodeError(str(exc), operation=operation) from exc
    if not isinstance(value, str) or not _is_web_url(value):
        raise ResponseDecodeError(
            f"({operation}) Error: expected a redirect URL, got {type(value).__name__}",
            operation=operation,
        )
    return value


def _is_web_url(text: str) -> bool:
    try:
        url = httpx.URL(text)
    except httpx.InvalidURL:
        return False
    return url.scheme in ("http", "https") and bool(url.host)


def _error_body_unreadable(operation: str, label: str, status_code: int, exc: ResponseDecodeError) -> ResponseDecodeError:
    error = ResponseDecodeError(
        f"({operation}) Error decoding {label} body: {exc}",
        operation=operation,
        status_code=status_code,
    )
    error.__cause__ = exc
    return error
