"""
Configuration loader for the AzamPay client.

Two sources:
- a keys file (JSON or YAML) holding the app registration credentials
- environment variables (a .env file is honoured via python-dotenv)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from azampay.contracts.interfaces import Environment

logger = logging.getLogger(__name__)


class AzamPayKeys(BaseModel):
    """App registration credentials issued by the AzamPay portal."""

    model_config = ConfigDict(populate_by_name=True)

    app_name: str = Field(alias="appName", min_length=1)
    client_id: str = Field(alias="clientId", min_length=1)
    client_secret: str = Field(alias="clientSecret", min_length=1)
    # sent as X-API-KEY
    api_key: str = Field(alias="token", min_length=1)

    @classmethod
    def from_env(cls) -> "AzamPayKeys":
        load_dotenv()
        return cls(
            app_name=os.getenv("AZAMPAY_APP_NAME", ""),
            client_id=os.getenv("AZAMPAY_CLIENT_ID", ""),
            client_secret=os.getenv("AZAMPAY_CLIENT_SECRET", ""),
            api_key=os.getenv("AZAMPAY_API_KEY", ""),
        )


class AzamPaySettings(BaseModel):
    environment: Environment = Environment.SANDBOX
    timeout_seconds: float = Field(default=20.0, gt=0)
    config_path: Optional[str] = None


def load_keys(config_path: Union[str, Path]) -> AzamPayKeys:
    """
    Load and validate app credentials from a keys file.

    Args:
        config_path: Path to a JSON or YAML file with appName, clientId,
            clientSecret and token.

    Returns:
        Validated AzamPayKeys object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If a key is missing or empty
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Keys file not found: {config_path}")

    # JSON is valid YAML, so one parser covers both formats
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Keys file must contain a mapping: {config_path}")

    try:
        keys = AzamPayKeys(**data)
        logger.info("Loaded AzamPay keys from %s", config_path)
        return keys
    except ValidationError as e:
        logger.error("AzamPay keys validation failed: %s", e)
        raise


def load_settings() -> AzamPaySettings:
    load_dotenv()
    data = {
        "environment": os.getenv("AZAMPAY_ENV", Environment.SANDBOX.value).strip().lower(),
        "timeout_seconds": os.getenv("AZAMPAY_TIMEOUT_SECONDS", "20"),
        "config_path": os.getenv("AZAMPAY_CONFIG") or None,
    }
    return AzamPaySettings(**data)
