"""
Mock integration clients.

These return fake (but realistic) gateway responses without calling any
external API. They are used when:
- sandbox credentials are not available
- we want to test flows end-to-end without network access

Mock transports must answer with bodies shaped according to azampay/contracts/*.
"""

from .sandbox import SandboxGateway

__all__ = ["SandboxGateway"]
