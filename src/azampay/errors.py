"""
Exceptions raised by the AzamPay client.

Every failure of a gateway operation surfaces to the caller as one of these
(transport failures excepted: httpx errors propagate unchanged). Nothing is
retried and nothing is swallowed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AzamPayError(Exception):
    """Base class for all SDK errors."""

    def __init__(self, message: str, *, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        return self.message


class PayloadValidationError(AzamPayError, ValueError):
    """A required payload field was left empty. Raised before any network call."""

    def __init__(self, field: str, *, operation: str) -> None:
        super().__init__(f"({operation}) Error: Field '{field}' is required.", operation=operation)
        self.field = field


class PayloadSerializationError(AzamPayError):
    pass


class GatewayResponseError(AzamPayError):
    """The gateway answered with a non-200 status."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.status_code = status_code
        self.payload = payload or {}


class BadRequestError(GatewayResponseError):
    pass


class UnauthorizedError(GatewayResponseError):
    pass


class InternalServerError(GatewayResponseError):
    pass


class UnexpectedStatusError(GatewayResponseError):
    pass


class ResponseDecodeError(AzamPayError, ValueError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, *, operation: str, status_code: int = 200) -> None:
        super().__init__(message, operation=operation)
        self.status_code = status_code


class EmptyResponseBodyError(ResponseDecodeError):
    def __init__(self, *, operation: str) -> None:
        super().__init__(f"({operation}) Error: Server returned an empty body.", operation=operation)
