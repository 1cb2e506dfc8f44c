"""
Integration clients.

- clients/real_http: talks to the AzamPay gateway over HTTPS
- clients/mocks: sandbox stand-ins that never leave the process
"""
