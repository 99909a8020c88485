"""
Credential lookup using the system keyring.

Credentials are read from the operating system's keyring service first
(service name ``budgetly``), falling back to environment variables, which
may come from a ``.env`` file.
"""

import os
from typing import Optional

import keyring
from keyring.errors import KeyringError

from budgetly.logger import get_logger
from budgetly.models.credentials import AppName, Environment, PlaidClientId, PlaidSecret

logger = get_logger("budgetly.credentials")

SERVICE_NAME = "budgetly"

KEY_ENVIRONMENT = "plaid_env"
KEY_CLIENT_ID = "plaid_client_id"
KEY_SECRET = "plaid_secret"
KEY_APP_NAME = "plaid_app_name"
KEY_TIMEOUT = "plaid_timeout"

# Validation model per key; None means stored as-is
CREDENTIALS = {
    KEY_ENVIRONMENT: Environment,
    KEY_CLIENT_ID: PlaidClientId,
    KEY_SECRET: PlaidSecret,
    KEY_APP_NAME: AppName,
    KEY_TIMEOUT: None,
}


def get_credential(key: str, fallback_to_env: bool = True) -> Optional[str]:
    """
    Get a credential from keyring, with optional fallback to the environment.

    Args:
        key: The credential key to retrieve
        fallback_to_env: If True, falls back to the upper-cased environment
            variable when the keyring has no value

    Returns:
        The credential value, or None if not found
    """
    try:
        value = keyring.get_password(SERVICE_NAME, key)
    except KeyringError as e:
        logger.debug(f"Keyring unavailable for {key}: {e}")
        value = None

    if value is not None:
        return value

    if fallback_to_env:
        return os.getenv(key.upper())

    return None


def set_credential(key: str, value: str) -> bool:
    """Store a credential in keyring after validating it.

    Raises pydantic.ValidationError if the value is malformed.
    """
    model_class = CREDENTIALS.get(key)
    if model_class:
        model_class(value=value)

    try:
        keyring.set_password(SERVICE_NAME, key, value)
        return True
    except KeyringError as e:
        logger.error(f"Failed to store {key} in keyring: {e}")
        return False


def mask(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a credential value for display."""
    if value is None:
        return "<not set>"

    if len(value) <= show_chars:
        return "*" * len(value)

    return "*" * (len(value) - show_chars) + value[-show_chars:]
