"""
Utility modules for the AzamPay client
"""
from .config_loader import AzamPayKeys, AzamPaySettings, load_keys, load_settings

__all__ = [
    'AzamPayKeys',
    'AzamPaySettings',
    'load_keys',
    'load_settings',
]
