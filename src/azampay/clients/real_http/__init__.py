"""
Real HTTP integration clients.

These clients communicate with the AzamPay authenticator and checkout APIs.

Important:
- Must return data shaped according to azampay/contracts/*
- Keep these modules as the ONLY place where gateway HTTP calls are made.
"""

from .gateway import AzamPayClient
from .session import generate_session

__all__ = ["AzamPayClient", "generate_session"]
